"""
Dense matrix of exact rational numbers.

The entries are BigFraction objects held in a numpy object array. An augmented
matrix of an n x n linear system is an n x (n+1) RationalMatrix whose last
column holds the right-hand side.
"""

from fractions import Fraction
from typing import List, Sequence
import numpy as np

from .big_fraction import BigFraction


class RationalMatrix:
    """
    Matrix with BigFraction entries.

    Entries are fixed after construction. Solvers take working copies of the
    rows with to_fraction_rows.
    """

    def __init__(self, rows: int, cols: int):
        """
        Initialize a zero matrix.

        Args:
            rows: Number of rows
            cols: Number of columns
        """
        if rows < 0:
            raise ValueError(f"negative row count: {rows}")
        if cols < 0:
            raise ValueError(f"negative column count: {cols}")
        self._data = np.empty((rows, cols), dtype=object)
        self._data.fill(BigFraction.ZERO)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> 'RationalMatrix':
        """
        Create a matrix from nested sequences of exact numbers.

        Args:
            rows: Row-major data, every entry convertible with BigFraction.value_of

        Returns:
            RationalMatrix holding the same values

        Raises:
            ValueError: If the rows differ in length
        """
        row_count = len(rows)
        col_count = len(rows[0]) if row_count > 0 else 0
        matrix = cls(row_count, col_count)
        for i, row in enumerate(rows):
            if len(row) != col_count:
                raise ValueError(f"row {i} has {len(row)} entries, expected {col_count}")
            for j, value in enumerate(row):
                matrix._data[i, j] = BigFraction.value_of(value)
        return matrix

    def get_row_count(self) -> int:
        return self._data.shape[0]

    def get_column_count(self) -> int:
        return self._data.shape[1]

    def get_value_at(self, row: int, col: int) -> BigFraction:
        return self._data[row, col]

    def to_rows(self) -> List[List[BigFraction]]:
        return [list(row) for row in self._data]

    def to_fraction_rows(self) -> List[List[Fraction]]:
        """New nested lists of fractions.Fraction, free to be modified"""
        return [[v.to_fraction() for v in row] for row in self._data]

    def clone(self) -> 'RationalMatrix':
        """Deep copy, BigFraction entries are immutable and can be shared"""
        copy = RationalMatrix(0, 0)
        copy._data = self._data.copy()
        return copy

    def to_sympy(self):
        """Convert to a sympy Matrix of exact Rationals"""
        from sympy import Matrix, Rational
        return Matrix(self.get_row_count(), self.get_column_count(),
                      lambda i, j: Rational(self._data[i, j].numerator, self._data[i, j].denominator))

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.all(self._data == other._data))

    def __str__(self) -> str:
        return "\n".join("[" + ", ".join(str(v) for v in row) + "]" for row in self._data)

    def __repr__(self) -> str:
        return f"RationalMatrix({self.get_row_count()}x{self.get_column_count()})"
