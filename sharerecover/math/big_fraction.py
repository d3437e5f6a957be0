"""
Exact rational numbers of arbitrary precision.

BigFraction wraps Python's fractions.Fraction, which keeps every value in lowest
terms with a positive denominator. The wrapper adds the error taxonomy of this
package (division by zero raises DivisionByZero), truncation toward zero and
lossless conversion from the rational types of sympy and python-flint.
"""

from fractions import Fraction
from typing import Union

from ..errors import DivisionByZero
from . import big_integer


class BigFraction:
    """
    Immutable exact rational number in reduced form.

    Invariants: gcd(|numerator|, denominator) == 1, denominator > 0 and
    zero is represented as 0/1.
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Union[int, 'BigFraction', Fraction], denominator: int = None):
        """
        Args:
            numerator: Either an int numerator, or another BigFraction/Fraction to copy
            denominator: Optional denominator (default 1 if not provided)

        Raises:
            DivisionByZero: If the denominator is zero
            TypeError: If numerator and denominator are not both ints
        """
        if denominator is None:
            if isinstance(numerator, BigFraction):
                self._fraction = numerator._fraction
            elif isinstance(numerator, Fraction):
                self._fraction = numerator
            elif isinstance(numerator, int) and not isinstance(numerator, bool):
                self._fraction = Fraction(numerator)
            else:
                raise TypeError(f"Cannot create BigFraction from {type(numerator).__name__}")
        else:
            for part in (numerator, denominator):
                if not isinstance(part, int) or isinstance(part, bool):
                    raise TypeError(f"Cannot create BigFraction from {type(part).__name__}")
            if denominator == 0:
                raise DivisionByZero()
            self._fraction = Fraction(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def to_fraction(self) -> Fraction:
        return self._fraction

    def abs(self) -> 'BigFraction':
        return BigFraction(abs(self._fraction))

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._fraction)

    def add(self, other) -> 'BigFraction':
        other = BigFraction.value_of(other)
        return BigFraction(self._fraction + other._fraction)

    def subtract(self, other) -> 'BigFraction':
        other = BigFraction.value_of(other)
        return BigFraction(self._fraction - other._fraction)

    def multiply(self, other) -> 'BigFraction':
        other = BigFraction.value_of(other)
        return BigFraction(self._fraction * other._fraction)

    def divide(self, other) -> 'BigFraction':
        """
        Divide by another rational.

        Raises:
            DivisionByZero: If other is zero
        """
        other = BigFraction.value_of(other)
        if other.is_zero():
            raise DivisionByZero()
        return BigFraction(self._fraction / other._fraction)

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._fraction.numerator < 0:
            return -1
        elif self._fraction.numerator > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._fraction.numerator == 0

    def is_integer(self) -> bool:
        return self._fraction.denominator == 1

    def to_big_integer(self) -> int:
        """Convert to integer, truncating toward zero"""
        return big_integer.trunc_div(self._fraction.numerator, self._fraction.denominator)

    def compare_to(self, other) -> int:
        """Compare to another rational: -1 if less, 0 if equal, 1 if greater"""
        return self.subtract(other).signum()

    def __eq__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction == other._fraction
        if isinstance(other, (int, Fraction)):
            return self._fraction == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_big_integer()

    def __float__(self) -> float:
        return float(self._fraction)

    def __str__(self) -> str:
        if self._fraction.denominator == 1:
            return str(self._fraction.numerator)
        return f"{self._fraction.numerator}/{self._fraction.denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self._fraction.numerator}, {self._fraction.denominator})"

    # Python operator overloading for convenience
    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return BigFraction.value_of(other).add(self)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return BigFraction.value_of(other).subtract(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return BigFraction.value_of(other).multiply(self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return BigFraction.value_of(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    @staticmethod
    def value_of(value) -> 'BigFraction':
        """
        Convert a number to BigFraction without loss of precision.

        Accepts int, fractions.Fraction, BigFraction, sympy.Rational,
        flint.fmpq and strings of the form "num" or "num/den".

        Raises:
            TypeError: If the value has no exact rational meaning (e.g. float)
            DivisionByZero: If a string or rational object has denominator zero
        """
        if isinstance(value, BigFraction):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to BigFraction")
        if isinstance(value, (int, Fraction)):
            return BigFraction(value)
        if isinstance(value, str):
            parts = value.strip().split('/')
            if len(parts) > 2:
                raise ValueError(f"Invalid fraction format: {value}")
            if len(parts) == 2:
                return BigFraction(int(parts[0]), int(parts[1]))
            return BigFraction(int(parts[0]))
        if hasattr(value, 'p') and hasattr(value, 'q'):
            # sympy.Rational and flint.fmpq
            return BigFraction(int(value.p), int(value.q))
        raise TypeError(f"Cannot convert {type(value).__name__} to BigFraction")


BigFraction.ZERO = BigFraction(0, 1)
BigFraction.ONE = BigFraction(1, 1)
