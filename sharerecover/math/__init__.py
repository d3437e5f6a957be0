"""
Exact arithmetic for share reconstruction

- Arbitrary-precision integer helpers (truncating division, Euclidean gcd)
- Exact rational numbers with BigFraction
- Rational matrices and Gaussian elimination

The sympy and flint solver backends are loaded on demand by get_gauss_instance.
"""

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix
from .gauss import Gauss as GaussianElimination, get_gauss_instance

__all__ = [
    'BigFraction',
    'RationalMatrix',
    'GaussianElimination',
    'get_gauss_instance',
]
