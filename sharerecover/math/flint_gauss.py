"""
FlintGauss - FLINT-accelerated exact linear solver.

Uses python-flint's fmpq_mat, whose solver runs in C. python-flint is an
optional dependency (extra 'flint'); importing this module without it raises
ImportError.
"""

from typing import List

from flint import fmpq, fmpq_mat

from ..errors import SingularMatrix
from .big_fraction import BigFraction
from .gauss import Gauss, AugmentedMatrix, as_augmented_matrix


class FlintGauss(Gauss):
    """Solve augmented systems with fmpq_mat.solve"""

    _rational_instance = None

    def solve(self, matrix: AugmentedMatrix) -> List[BigFraction]:
        m = as_augmented_matrix(matrix)
        n = m.get_row_count()
        a = fmpq_mat(n, n)
        b = fmpq_mat(n, 1)
        for r in range(n):
            for c in range(n + 1):
                value = m.get_value_at(r, c)
                entry = fmpq(value.numerator, value.denominator)
                if c < n:
                    a[r, c] = entry
                else:
                    b[r, 0] = entry
        try:
            x = a.solve(b)
        except ZeroDivisionError as e:
            raise SingularMatrix() from e
        return [BigFraction.value_of(x[i, 0]) for i in range(n)]
