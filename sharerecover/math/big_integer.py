"""
Arbitrary-precision integer helpers for exact arithmetic.

Python's int already has unbounded magnitude, so addition, subtraction,
multiplication and absolute value are the builtin operators. This module adds
the operations whose semantics differ from Python's floor-based ``//`` and
``%``: division truncating toward zero, the matching remainder, and the
Euclidean greatest common divisor.
"""

from ..errors import DivisionByZero


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Args:
        a: First integer (any sign)
        b: Second integer (any sign)

    Returns:
        Non-negative gcd of a and b. gcd(0, 0) is 0, callers must not use it
        as a divisor.
    """
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b != 0:
        a, b = b, a % b
    return a


def trunc_div(a: int, b: int) -> int:
    """
    Integer division rounding toward zero.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        The quotient a / b with the fractional part dropped

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero()
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def trunc_mod(a: int, b: int) -> int:
    """Remainder of trunc_div, it carries the sign of the dividend."""
    return a - b * trunc_div(a, b)
