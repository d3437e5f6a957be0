"""
Linear solver backed by sympy's exact Matrix arithmetic.

Gives an independent implementation of Gauss.solve, mainly to cross-check the
pure Python elimination.
"""

from typing import List

from ..errors import SingularMatrix
from .big_fraction import BigFraction
from .gauss import Gauss, AugmentedMatrix, as_augmented_matrix


class SympyGauss(Gauss):
    """Solve augmented systems with sympy.Matrix.LUsolve"""

    _rational_instance = None

    def solve(self, matrix: AugmentedMatrix) -> List[BigFraction]:
        m = as_augmented_matrix(matrix).to_sympy()
        n = m.rows
        a = m[:, :n]
        b = m[:, n]
        if a.rank() < n:
            raise SingularMatrix()
        x = a.LUsolve(b)
        return [BigFraction.value_of(x[i, 0]) for i in range(n)]
