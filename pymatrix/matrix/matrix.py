"""
Matrix: dense, rectangular grid of float64 values.

A Matrix exclusively owns a C-contiguous float64 array. Its shape is fixed
at construction; the only in-place mutators (fill, randomize, update and
single-cell assignment) change values, never shape. Every algebraic
operation returns a new Matrix with freshly allocated storage.

Scalar and matrix operands have separate entry points (add / add_scalar,
sub / sub_scalar, mul / mul_scalar). The Python operators dispatch onto
them.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.linalg import cofactor_determinant, gauss_jordan_inverse
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.tolerances import APPROXIMATE, DEFAULT_RANDOM_RANGE, EXACT
from pymatrix.core.validation import (
    check_dimension,
    check_grid,
    check_inner_dimensions,
    check_same_shape,
    check_scalar,
    check_tolerance,
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Matrix:
    """
    Dense numeric matrix.

    Construction:
        Matrix(rows, cols=None, fill=0.0)
        Matrix.from_grid([[1, 2], [3, 4]])
        Matrix.zeros(n), Matrix.ones(r, c), Matrix.identity(n), Matrix.random(r, c)

    Shape is exposed read-only through rows, cols and shape.
    """

    __slots__ = ('_data',)

    def __init__(self, rows: int, cols: int | None = None, fill: float = 0.0):
        """
        Build a rows x cols matrix with every cell set to fill.

        Parameters
        ----------
        rows : int
            Number of rows (non-negative).
        cols : int, optional
            Number of columns. If None, the matrix is square.
        fill : float
            Initial value of every cell.
        """
        n = check_dimension(rows, "rows")
        p = n if cols is None else check_dimension(cols, "cols")
        value = check_scalar(fill, "fill")
        self._data: NDArray[np.floating[Any]] = np.full((n, p), value, dtype=np.float64)

    @classmethod
    def _wrap(cls, array: NDArray[np.floating[Any]]) -> Matrix:
        """Take ownership of an already validated 2D float64 array."""
        matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> Matrix:
        """
        Build a Matrix from a rectangular grid.

        The grid is copied; later changes to it do not affect the Matrix.

        Raises
        ------
        ShapeError
            If the grid is ragged, not 2D, or empty.
        ValidationError
            If the grid holds non-numeric or complex values.
        """
        return cls._wrap(check_grid(grid, "grid"))

    create = from_grid

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> Matrix:
        """rows x cols matrix of zeros (square if cols is omitted)."""
        return cls(rows, cols, fill=0.0)

    @classmethod
    def ones(cls, rows: int, cols: int | None = None) -> Matrix:
        """rows x cols matrix of ones (square if cols is omitted)."""
        return cls(rows, cols, fill=1.0)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_dimension(n, "n")
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int | None = None,
        minimum: float = DEFAULT_RANDOM_RANGE[0],
        maximum: float = DEFAULT_RANDOM_RANGE[1],
        rng: np.random.Generator | None = None,
    ) -> Matrix:
        """
        rows x cols matrix drawn uniformly from [minimum, maximum).

        Pass a seeded numpy Generator as rng for reproducible draws.
        """
        matrix = cls(rows, cols)
        matrix.randomize(minimum, maximum, rng=rng)
        return matrix

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the cells. Use m[r, c] = v to write."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_list(self) -> list[list[float]]:
        """Independent nested list of Python floats."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Independent, writable copy of the cells."""
        return self._data.copy()

    def _check_index(self, key: Any) -> tuple[int, int]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise ValidationError(f"index: expected (row, col), got {key!r}")
        row, col = key
        row = check_dimension(row, "row")
        col = check_dimension(col, "col")
        if row >= self.rows or col >= self.cols:
            raise IndexError(
                f"index ({row}, {col}) out of range for {self.rows}x{self.cols} matrix"
            )
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check_index(key)
        return float(self._data[row, col])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check_index(key)
        self._data[row, col] = check_scalar(value, "value")

    # ------------------------------------------------------------------
    # In-place mutation and traversal
    # ------------------------------------------------------------------

    def fill(self, value: float) -> None:
        """Set every cell to value, keeping the shape."""
        self._data[...] = check_scalar(value, "value")

    def randomize(
        self,
        minimum: float = DEFAULT_RANDOM_RANGE[0],
        maximum: float = DEFAULT_RANDOM_RANGE[1],
        rng: np.random.Generator | None = None,
    ) -> None:
        """Refill every cell uniformly from [minimum, maximum)."""
        low = check_scalar(minimum, "minimum")
        high = check_scalar(maximum, "maximum")
        if not low < high:
            raise ValidationError(
                f"randomize: minimum must be below maximum, got [{low}, {high})"
            )
        if rng is None:
            rng = np.random.default_rng()
        self._data[...] = rng.uniform(low, high, size=self.shape)

    def update(self, fn: Callable[[float, int, int], float]) -> None:
        """
        Replace every cell with fn(value, row, col).

        Cells are visited row by row, left to right. All new values are
        computed before any cell is written, so if fn raises the matrix
        is left unchanged.
        """
        result = np.empty_like(self._data)
        for r in range(self.rows):
            for c in range(self.cols):
                value = fn(float(self._data[r, c]), r, c)
                result[r, c] = check_scalar(value, "update result")
        self._data[...] = result

    def for_each(self, fn: Callable[[float, int, int], Any]) -> None:
        """Call fn(value, row, col) for every cell, row by row, left to right."""
        for r in range(self.rows):
            for c in range(self.cols):
                fn(float(self._data[r, c]), r, c)

    def clone(self) -> Matrix:
        """Deep copy with independent storage."""
        return Matrix._wrap(self._data.copy())

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def approximately_equal(self, other: Matrix, tolerance: float = APPROXIMATE.atol) -> bool:
        """
        True iff every pair of cells differs by at most tolerance.

        Raises
        ------
        ShapeError
            If the shapes differ. Mismatched shapes are an error, not False.
        """
        other = _check_matrix(other, "approximately_equal")
        tol = check_tolerance(tolerance, "tolerance")
        check_same_shape(self.shape, other.shape, "equality")

        a, b = self._data, other._data
        with np.errstate(invalid='ignore'):
            close = (a == b) | (np.abs(a - b) <= tol)
        return bool(np.all(close))

    def equal(self, other: Matrix) -> bool:
        """Exact cellwise equality. Raises ShapeError on shape mismatch."""
        return self.approximately_equal(other, EXACT.atol)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum with a matrix of identical shape."""
        other = _check_matrix(other, "add")
        check_same_shape(self.shape, other.shape, "add")
        return Matrix._wrap(self._data + other._data)

    def add_scalar(self, value: float) -> Matrix:
        """Add value to every cell."""
        return Matrix._wrap(self._data + check_scalar(value, "value"))

    def sub(self, other: Matrix) -> Matrix:
        """Elementwise difference with a matrix of identical shape."""
        other = _check_matrix(other, "sub")
        check_same_shape(self.shape, other.shape, "sub")
        return Matrix._wrap(self._data - other._data)

    def sub_scalar(self, value: float) -> Matrix:
        """Subtract value from every cell."""
        return Matrix._wrap(self._data - check_scalar(value, "value"))

    def mul(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Requires self.cols == other.rows; the result is self.rows x other.cols.
        """
        other = _check_matrix(other, "mul")
        check_inner_dimensions(self.shape, other.shape, "mul")
        return Matrix._wrap(np.ascontiguousarray(self._data @ other._data))

    def mul_scalar(self, value: float) -> Matrix:
        """Multiply every cell by value."""
        return Matrix._wrap(self._data * check_scalar(value, "value"))

    def transpose(self) -> Matrix:
        """New cols x rows matrix with result[c, r] == self[r, c]."""
        return Matrix._wrap(self._data.T.copy())

    def square(self) -> Matrix:
        """self @ self. Non-square matrices raise ShapeError."""
        return self.mul(self)

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination.

        Raises
        ------
        ShapeError
            If the matrix is not square.
        SingularMatrixError
            If some column has no non-zero pivot.
        """
        return Matrix._wrap(gauss_jordan_inverse(self._data).inverse)

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Raises
        ------
        ShapeError
            If the matrix is not square.
        """
        return cofactor_determinant(self._data)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add(other)
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.sub(other)
        if _is_scalar(other):
            return self.sub_scalar(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return Matrix._wrap(check_scalar(other, "value") - self._data)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.mul_scalar(other)
        return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.mul(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    # ------------------------------------------------------------------
    # Serialization and display
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """JSON text; see pymatrix.matrix.serialization."""
        from pymatrix.matrix.serialization import serialize
        return serialize(self)

    @classmethod
    def deserialize(cls, text: str) -> Matrix:
        """Inverse of serialize()."""
        from pymatrix.matrix.serialization import deserialize
        return deserialize(text)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def __str__(self) -> str:
        return str(self._data)


def _check_matrix(other: Any, operation: str) -> Matrix:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )
    return other


def square(matrix_or_grid: Matrix | ArrayLike) -> Matrix:
    """
    Square a Matrix or a raw grid.

    Raw grids are converted with Matrix.from_grid first.
    """
    if isinstance(matrix_or_grid, Matrix):
        return matrix_or_grid.square()
    return Matrix.from_grid(matrix_or_grid).square()
