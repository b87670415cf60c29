"""
Input validation utilities for matcache.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from matcache.core.exceptions import (
    ValidationError,
    DimensionError,
    NonInvertibleInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.
    
    Accepts any array-like and converts to a float64 array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged rows)
    and non-numeric dtypes.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged rows"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real entries"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has as many rows as columns.
    
    Empty (0 x 0) matrices are rejected as well: there is nothing to invert.
    
    Args:
        array: 2D array to check
        name: Parameter name for error messages
        
    Raises:
        NonInvertibleInputError: If array is not square, or is empty
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise NonInvertibleInputError(
            f"{name}: matrix is not square (shape {array.shape}), "
            f"only square matrices can be inverted",
            shape=array.shape,
            reason='not_square',
        )
    if n_rows == 0:
        raise NonInvertibleInputError(
            f"{name}: matrix is empty (shape {array.shape})",
            shape=array.shape,
            reason='not_square',
        )


def check_matrix(matrix: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a candidate matrix in one pass.
    
    Runs check_array, check_2d, check_finite and check_square in that order.
    
    Returns:
        float64 array with shape (n, n)
    """
    arr = check_array(matrix, name)
    check_2d(arr, name)
    check_finite(arr, name)
    check_square(arr, name)
    return arr
