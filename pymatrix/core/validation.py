"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float64 conversion of numeric grids)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import ValidationError, ShapeError


def check_dimension(value: Any, name: str) -> int:
    """
    Verify value is a usable matrix dimension.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real scalar.

    Args:
        value: Candidate scalar operand
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_tolerance(tolerance: Any, name: str) -> float:
    """
    Verify tolerance is a non-negative real number.

    Raises:
        ValidationError: If tolerance is not real or is negative
    """
    tol = check_scalar(tolerance, name)
    if tol < 0 or np.isnan(tol):
        raise ValidationError(f"{name}: must be non-negative, got {tol}")
    return tol


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data),
    and complex or otherwise non-real data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bools, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ShapeError: If array is not 2D
    """
    if array.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D grid, got {array.ndim}D with shape {array.shape}",
            actual=array.shape,
        )


def check_rectangular(grid: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    ndarrays are rectangular by construction and pass unchecked.

    Raises:
        ShapeError: If grid is not a sequence of sequences, or is ragged
    """
    if isinstance(grid, np.ndarray):
        return
    try:
        lengths = [len(row) for row in grid]
    except TypeError as e:
        raise ShapeError(f"{name}: expected a sequence of rows: {e}") from e
    if len(set(lengths)) > 1:
        raise ShapeError(f"{name}: ragged grid, row lengths {lengths}")


def check_grid(grid: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a grid and return an independent float64 copy of it.

    Args:
        grid: Nested sequence of rows, or a 2D array
        name: Parameter name for error messages

    Returns:
        C-contiguous float64 array owned by the caller

    Raises:
        ShapeError: If grid is ragged, not 2D, or has no rows or no columns
        ValidationError: If grid content is not real numeric data
    """
    check_rectangular(grid, name)
    array = check_array(grid, name)
    check_2d(array, name)

    n, p = array.shape
    if n == 0 or p == 0:
        raise ShapeError(
            f"{name}: empty grid with shape {array.shape}", actual=array.shape
        )

    return np.array(array, dtype=np.float64, order='C', copy=True)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical.

    Raises:
        ShapeError: If the shapes differ
    """
    if left != right:
        raise ShapeError(
            f"{operation}: shapes do not match, {left} vs {right}",
            expected=left,
            actual=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        ShapeError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeError(
            f"{operation}: inner dimensions do not match, "
            f"{left[0]}x{left[1]} @ {right[0]}x{right[1]}",
            actual=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        ShapeError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise ShapeError(
            f"{operation}: matrix must be square, got {shape[0]}x{shape[1]}",
            actual=shape,
        )
