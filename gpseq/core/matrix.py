# gpseq/core/matrix.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Dense matrix container.

`Matrix` has a shape fixed at construction and mutable content. Element
access is bounds-checked (negative indices are rejected, unlike NumPy),
and every constructor copies its input so that two matrices never share
storage.
"""
import numbers

import gpseq.num as gnp
from .errors import MatrixShapeError


class Matrix:
    """Rectangular float64 matrix with bounds-checked access.

    Parameters
    ----------
    rows : int
        Number of rows.
    columns : int
        Number of columns.

    Examples
    --------
    >>> K = Matrix.zeros(2, 2)
    >>> K.set(0, 1, 0.5)
    >>> K.get(0, 1)
    0.5
    >>> K.transpose().get(1, 0)
    0.5
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int, columns: int):
        if rows < 0 or columns < 0:
            raise MatrixShapeError(
                f"Matrix dimensions must be non-negative, got ({rows}, {columns})"
            )
        self._data = gnp.zeros((int(rows), int(columns)))

    # ------------------------------------------------------------- constructors
    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        return cls(rows, columns)

    @classmethod
    def from_rows(cls, rows) -> "Matrix":
        """Copy a 2-D structure (list of rows or 2-D array) into a new matrix."""
        if isinstance(rows, Matrix):
            return rows.clone()
        if gnp.isarray(rows):
            if rows.ndim != 2:
                raise MatrixShapeError(f"Expected a 2-D array, got {rows.ndim} dimensions")
            return cls._wrap(gnp.array(rows, dtype=gnp.float64))
        rows = [list(r) for r in rows]
        ncols = len(rows[0]) if rows else 0
        for i, r in enumerate(rows):
            if len(r) != ncols:
                raise MatrixShapeError(
                    f"Row {i} has {len(r)} elements, expected {ncols}"
                )
        M = cls(len(rows), ncols)
        if rows and ncols:
            M._data[:, :] = gnp.array(rows, dtype=gnp.float64)
        return M

    @classmethod
    def _wrap(cls, data) -> "Matrix":
        """Adopt a 2-D float64 array without copying (internal use)."""
        M = cls.__new__(cls)
        M._data = data
        return M

    # ------------------------------------------------------------- shape
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    # ------------------------------------------------------------- access
    def _check_row(self, row):
        if not isinstance(row, numbers.Integral) or not 0 <= row < self.rows:
            raise IndexError(f"Row index out of bounds: {row}")

    def _check_column(self, column):
        if not isinstance(column, numbers.Integral) or not 0 <= column < self.columns:
            raise IndexError(f"Column index out of bounds: {column}")

    def _check_index(self, row, column):
        if not (
            isinstance(row, numbers.Integral)
            and isinstance(column, numbers.Integral)
            and 0 <= row < self.rows
            and 0 <= column < self.columns
        ):
            raise IndexError(f"Index out of bounds: ({row}, {column})")

    def get(self, row: int, column: int) -> float:
        self._check_index(row, column)
        return float(self._data[row, column])

    def set(self, row: int, column: int, value: float) -> None:
        self._check_index(row, column)
        self._data[row, column] = value

    def get_row(self, row: int):
        """Return a copy of row `row` as a 1-D array."""
        self._check_row(row)
        return self._data[row, :].copy()

    def get_column(self, column: int):
        """Return a copy of column `column` as a 1-D array."""
        self._check_column(column)
        return self._data[:, column].copy()

    def add_to_diagonal(self, value: float) -> "Matrix":
        """In-place ``M[i, i] += value``; returns self."""
        n = min(self.rows, self.columns)
        idx = gnp.arange(n)
        self._data[idx, idx] += value
        return self

    # ------------------------------------------------------------- derived
    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def clone(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    def to_list(self):
        return self._data.tolist()

    def to_numpy(self):
        return self._data.copy()

    # ------------------------------------------------------------- special methods
    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(gnp.all(self._data == other._data))

    __hash__ = None

    def __repr__(self):
        return f"Matrix(rows={self.rows}, columns={self.columns})"


def ensure_2d(X) -> Matrix:
    """Convert `X` to an (n, d) Matrix of points.

    A scalar becomes a 1 x 1 matrix and a 1-D sequence of n scalars
    becomes an n x 1 matrix (one feature per point). Matrix inputs are
    copied.
    """
    if isinstance(X, Matrix):
        return X.clone()
    if gnp.isscalar(X):
        return Matrix._wrap(gnp.array([[X]], dtype=gnp.float64))
    if not gnp.isarray(X):
        X = list(X)
        if X and not gnp.isscalar(X[0]) and not gnp.isarray(X[0]):
            return Matrix.from_rows(X)
    X = gnp.array(X, dtype=gnp.float64)
    if X.ndim == 1:
        return Matrix._wrap(X.reshape(-1, 1))
    if X.ndim == 2:
        return Matrix._wrap(X)
    raise MatrixShapeError(f"Expected 1-D or 2-D input, got {X.ndim} dimensions")
