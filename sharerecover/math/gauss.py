"""
Gaussian elimination over exact rationals.

Solves square linear systems given as augmented matrices [A | b] exactly.
Pivoting only looks for a nonzero entry: with exact arithmetic there is no
rounding error to minimize, a pivot merely has to be a valid divisor.
"""

from fractions import Fraction
from typing import List, Sequence, Union

from .. import names
from ..errors import SingularMatrix
from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix

AugmentedMatrix = Union[RationalMatrix, Sequence[Sequence]]


def as_augmented_matrix(matrix: AugmentedMatrix) -> RationalMatrix:
    """
    Return an n x (n+1) augmented matrix as RationalMatrix.

    Args:
        matrix: RationalMatrix or nested sequences of ints/rationals

    Returns:
        The matrix itself, or a new RationalMatrix built from nested sequences

    Raises:
        ValueError: If the matrix is empty or not of shape n x (n+1)
    """
    if isinstance(matrix, RationalMatrix):
        m = matrix
    else:
        m = RationalMatrix.from_rows(matrix)
    n = m.get_row_count()
    if n == 0 or m.get_column_count() != n + 1:
        raise ValueError(f"Augmented matrix must be n x (n+1) with n > 0, got "
                         f"{m.get_row_count()}x{m.get_column_count()}")
    return m


class Gauss:
    """
    Exact linear system solver by forward elimination and back substitution.

    The solver keeps no state between calls and never modifies its input, so
    one instance can be shared, also between threads.
    """

    _rational_instance = None

    @classmethod
    def get_rational_instance(cls) -> 'Gauss':
        """Get shared instance"""
        if cls._rational_instance is None:
            cls._rational_instance = cls()
        return cls._rational_instance

    def solve(self, matrix: AugmentedMatrix) -> List[BigFraction]:
        """
        Solve the n x n system given by an augmented matrix [A | b].

        Args:
            matrix: n x (n+1) augmented matrix

        Returns:
            Solution vector x with A x = b, entry i belongs to column i

        Raises:
            SingularMatrix: If the system has no unique solution
            ValueError: If the matrix has the wrong shape
        """
        rows = as_augmented_matrix(matrix).to_fraction_rows()
        self._forward_eliminate(rows)
        return [BigFraction(v) for v in self._back_substitute(rows)]

    def residual(self, matrix: AugmentedMatrix, solution: Sequence) -> List[BigFraction]:
        """
        Compute A x - b for every row of an augmented matrix [A | b].

        All entries are zero if and only if solution solves the system.
        """
        rows = as_augmented_matrix(matrix).to_fraction_rows()
        n = len(rows)
        if len(solution) != n:
            raise ValueError(f"expected {n} solution entries, got {len(solution)}")
        x = [BigFraction.value_of(v).to_fraction() for v in solution]
        return [BigFraction(sum(a * b for a, b in zip(row[:n], x)) - row[n]) for row in rows]

    def _find_pivot_row(self, rows: List[List[Fraction]], start_row: int, col: int) -> int:
        """First row at or below start_row with a nonzero entry in col, -1 if none"""
        for row in range(start_row, len(rows)):
            if rows[row][col]:
                return row
        return -1

    def _forward_eliminate(self, rows: List[List[Fraction]]):
        """Bring the augmented rows to upper triangular form (in-place)"""
        n = len(rows)
        for i in range(n):
            pivot_row = self._find_pivot_row(rows, i, i)
            if pivot_row == -1:
                raise SingularMatrix()
            if pivot_row != i:
                rows[i], rows[pivot_row] = rows[pivot_row], rows[i]
            pivot = rows[i]
            for k in range(i + 1, n):
                row = rows[k]
                if not row[i]:
                    continue
                multiplier = row[i] / pivot[i]
                # columns left of i are zero in both rows
                for j in range(i, n + 1):
                    if pivot[j]:
                        row[j] -= multiplier * pivot[j]

    def _back_substitute(self, rows: List[List[Fraction]]) -> List[Fraction]:
        n = len(rows)
        solution = [Fraction(0)] * n
        for i in range(n - 1, -1, -1):
            row = rows[i]
            if not row[i]:
                raise SingularMatrix()
            total = row[n]
            for j in range(i + 1, n):
                if row[j]:
                    total -= row[j] * solution[j]
            solution[i] = total / row[i]
        return solution


def get_gauss_instance(backend: str = names.FRACTION) -> Gauss:
    """
    Return the linear solver for a backend name.

    Args:
        backend: 'fraction' (pure Python elimination), 'sympy' or 'flint'

    Returns:
        Solver instance with solve() and residual()

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend == names.FRACTION:
        return Gauss.get_rational_instance()
    if backend == names.SYMPY:
        from .sympy_gauss import SympyGauss
        return SympyGauss.get_rational_instance()
    if backend == names.FLINT:
        from .flint_gauss import FlintGauss
        return FlintGauss.get_rational_instance()
    raise ValueError(f"Unknown solver backend '{backend}', choose from {', '.join(names.BACKENDS)}")
