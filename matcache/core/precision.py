"""
Numerical precision constants and utilities.

Holds the fixed numeric policy of the cache: how many decimals a cached
inverse keeps, how coarsely an inverse is compared against the identity,
and the pivot tolerance used to call a matrix singular.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Decimals kept in a cached inverse. Rounding happens once, when the
# inverse is written, so every read returns the same values.
CACHE_DECIMALS: int = 2

# Decimals used when checking candidate @ matrix against the identity.
# Coarser than CACHE_DECIMALS because the cached inverse is itself rounded.
IDENTITY_DECIMALS: int = 1


def pivot_tolerance(pivots: NDArray[np.floating[Any]], order: int) -> float:
    """
    Threshold below which an LU pivot counts as zero.
    
    Same rule as numerical rank from a QR diagonal:
    ``order * eps * max|pivot|``.
    
    Args:
        pivots: Absolute values of the U diagonal
        order: Matrix order n
        
    Returns:
        Absolute tolerance, 0.0 for an all-zero diagonal
    """
    if pivots.size == 0:
        return 0.0
    return float(order * EPSILON_64 * np.max(pivots))


def round_inverse(
    inverse: NDArray[np.floating[Any]],
    decimals: int = CACHE_DECIMALS,
) -> NDArray[np.floating[Any]]:
    """
    Round an inverse to its cached representation.
    
    Negative zeros produced by rounding are normalized to +0.0 so cached
    values compare and print cleanly.
    """
    rounded = np.round(inverse, decimals)
    rounded[rounded == 0.0] = 0.0
    return rounded


def is_identity(
    product: NDArray[np.floating[Any]],
    decimals: int = IDENTITY_DECIMALS,
) -> bool:
    """Check whether a square product rounds to the identity matrix."""
    if product.ndim != 2 or product.shape[0] != product.shape[1]:
        return False
    expected = np.eye(product.shape[0])
    return bool(np.array_equal(np.round(product, decimals), expected))


def is_inverse(
    candidate: NDArray[np.floating[Any]],
    matrix: NDArray[np.floating[Any]],
    decimals: int = IDENTITY_DECIMALS,
) -> bool:
    """
    Check that ``candidate @ matrix`` rounds to the identity.
    
    Args:
        candidate: Proposed inverse (n x n)
        matrix: Original matrix (n x n)
        decimals: Rounding applied to the product before comparison
        
    Returns:
        True if the rounded product is exactly the identity
    """
    candidate = np.asarray(candidate, dtype=np.float64)
    matrix = np.asarray(matrix, dtype=np.float64)
    if candidate.ndim != 2 or candidate.shape != matrix.shape:
        return False
    return is_identity(candidate @ matrix, decimals)
