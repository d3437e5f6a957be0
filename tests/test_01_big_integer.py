"""Test the arbitrary-precision integer helpers."""
import pytest
from sharerecover.errors import DivisionByZero
from sharerecover.math import big_integer as bi


def test_gcd():
    assert bi.gcd(12, 18) == 6
    assert bi.gcd(-12, 18) == 6
    assert bi.gcd(12, -18) == 6
    assert bi.gcd(0, -5) == 5
    assert bi.gcd(7, 0) == 7
    assert bi.gcd(17, 5) == 1


def test_gcd_of_zeros_is_zero():
    assert bi.gcd(0, 0) == 0


def test_gcd_big_numbers():
    assert bi.gcd(3 * 2**200, 5 * 2**150) == 2**150
    assert bi.gcd(2**521 - 1, 2**607 - 1) == 1


def test_trunc_div_rounds_toward_zero():
    assert bi.trunc_div(7, 2) == 3
    assert bi.trunc_div(-7, 2) == -3
    assert bi.trunc_div(7, -2) == -3
    assert bi.trunc_div(-7, -2) == 3
    assert bi.trunc_div(-6, 3) == -2
    assert bi.trunc_div(0, -3) == 0
    assert bi.trunc_div(-(10**40) - 1, 10**20) == -(10**20)


def test_trunc_mod_sign_follows_dividend():
    assert bi.trunc_mod(7, 2) == 1
    assert bi.trunc_mod(-7, 2) == -1
    assert bi.trunc_mod(7, -2) == 1
    assert bi.trunc_mod(-7, -2) == -1
    for a in (-13, -7, 0, 5, 22, 3**50):
        for b in (-5, -1, 3, 7, 2**70):
            assert a == b * bi.trunc_div(a, b) + bi.trunc_mod(a, b)


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        bi.trunc_div(5, 0)
    with pytest.raises(ZeroDivisionError):
        bi.trunc_mod(5, 0)
