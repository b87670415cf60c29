"""
Matrix inversion via LU decomposition.

Factorizes A = PLU with partial pivoting (LAPACK getrf via SciPy) and solves
against the identity (getrs). Used by CacheCell to test candidate matrices
and by solve_with_cache to fill the cache.
"""

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from matcache.core.exceptions import DimensionError, SingularMatrixError
from matcache.core.precision import pivot_tolerance
from matcache.core.validation import check_finite


@dataclass(frozen=True)
class InverseResult:
    """
    Result of LU-based inversion.
    
    Attributes:
        inverse: Full-precision inverse (n x n)
        min_pivot: Smallest absolute pivot on the U diagonal
        tolerance: Pivot tolerance the matrix was checked against
    """
    inverse: NDArray[np.floating[Any]]
    min_pivot: float
    tolerance: float


def inverse_cpu(
    A: NDArray[np.floating[Any]],
    name: str = 'A',
) -> InverseResult:
    """
    Invert a square matrix using LAPACK (via SciPy).
    
    Args:
        A: Matrix to invert (n x n), finite float entries
        name: Matrix name for error messages
        
    Returns:
        InverseResult with the inverse and pivot diagnostics
        
    Raises:
        DimensionError: If A is not a non-empty square 2D array
        SingularMatrixError: If any pivot is at or below tolerance
    """
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[0] == 0:
        raise DimensionError(
            f"{name}: expected non-empty square 2D array, got shape {A.shape}"
        )
    check_finite(A, name)
    
    n = A.shape[0]
    
    # getrf reports an exactly zero pivot as a warning; the pivot check
    # below turns that (and near-zero pivots) into SingularMatrixError.
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A, check_finite=False)
    
    pivots = np.abs(np.diag(lu))
    tol = pivot_tolerance(pivots, n)
    rank = int(np.sum(pivots > tol))
    
    if rank < n:
        raise SingularMatrixError(
            f"{name} is singular: rank={rank}, expected={n}. "
            f"Smallest pivot {pivots.min():.3g} is at or below tolerance {tol:.3g}.",
            matrix_name=name,
            rank=rank,
            expected_rank=n
        )
    
    inverse = lu_solve((lu, piv), np.eye(n), check_finite=False)
    
    # Pivots above tolerance can still be tiny enough (e.g. subnormal)
    # for the inverse to overflow.
    if not np.all(np.isfinite(inverse)):
        raise SingularMatrixError(
            f"{name} is numerically singular: inverse overflows float64 "
            f"(smallest pivot {pivots.min():.3g}).",
            matrix_name=name,
            rank=rank,
            expected_rank=n
        )
    
    return InverseResult(
        inverse=inverse,
        min_pivot=float(pivots.min()),
        tolerance=tol,
    )
