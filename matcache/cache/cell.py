"""
Single-slot inverse cache bound to one matrix.

A CacheCell owns one square, invertible matrix and at most one memoized
inverse of it. The only way to change the matrix is set_value(), which
validates the candidate first and clears the inverse slot in the same step.
"""

from dataclasses import dataclass
from typing import Any
import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from matcache.core.compute.linalg import inverse_cpu
from matcache.core.exceptions import (
    NonInvertibleInputError,
    SingularMatrixError,
    ValidationError,
)
from matcache.core.validation import check_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheInfo:
    """
    Snapshot of a cell's cache statistics.
    
    Attributes:
        hits: Lookups served from the inverse slot
        misses: Lookups that had to compute the inverse
        populated: Whether the inverse slot currently holds a value
    """
    hits: int
    misses: int
    populated: bool


def _read_only(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    array.flags.writeable = False
    return array


class CacheCell:
    """
    A matrix together with a slot for its memoized inverse.
    
    The stored matrix and inverse are private read-only float64 copies, so
    arrays handed out by the getters cannot be modified in place.
    
    Args:
        x: Initial matrix. Must be square and invertible. Defaults to the
           1 x 1 placeholder [[1.0]].
    
    Raises:
        NonInvertibleInputError: If x is not square or is singular
        ValidationError: If x is not a finite numeric 2D array
    
    Example:
        >>> cell = CacheCell([[2, 0], [0, 2]])
        >>> solve_with_cache(cell)
        array([[0.5, 0. ],
               [0. , 0.5]])
    """
    
    def __init__(self, x: ArrayLike | None = None):
        self._value: NDArray[np.floating[Any]] | None = None
        self._cached_inverse: NDArray[np.floating[Any]] | None = None
        self._hits = 0
        self._misses = 0
        self.set_value([[1.0]] if x is None else x)
    
    def set_value(self, y: ArrayLike) -> None:
        """
        Replace the stored matrix and clear the cached inverse.
        
        The candidate is inverted once as a test. If anything about it is
        wrong, nothing is changed.
        
        Args:
            y: New matrix (n x n)
            
        Raises:
            NonInvertibleInputError: If y is not square or is singular
            ValidationError: If y is not a finite numeric 2D array
        """
        try:
            candidate = check_matrix(y, 'y')
        except ValidationError as e:
            logger.warning("Rejected new matrix value: %s", e)
            raise
        
        try:
            inverse_cpu(candidate, 'y')
        except SingularMatrixError as e:
            logger.warning("Rejected new matrix value: %s", e)
            raise NonInvertibleInputError(
                f"y: matrix is singular and cannot be inverted: {e}",
                shape=candidate.shape,
                reason='singular',
                rank=e.rank,
            ) from e
        
        self._value = _read_only(candidate)
        self._cached_inverse = None
    
    def get_value(self) -> NDArray[np.floating[Any]]:
        """Return the stored matrix."""
        return self._value
    
    def set_cached_inverse(self, s: ArrayLike | None) -> None:
        """
        Store s as the memoized inverse. None empties the slot.
        
        No validation is done: the caller is trusted to pass the inverse of
        the current value.
        """
        if s is None:
            self._cached_inverse = None
        else:
            self._cached_inverse = _read_only(np.array(s, dtype=np.float64))
    
    def get_cached_inverse(self) -> NDArray[np.floating[Any]] | None:
        """Return the memoized inverse, or None if the slot is empty."""
        return self._cached_inverse
    
    @property
    def shape(self) -> tuple[int, int]:
        return self._value.shape
    
    def _record_hit(self) -> None:
        self._hits += 1
    
    def _record_miss(self) -> None:
        self._misses += 1
    
    def cache_info(self) -> CacheInfo:
        """Report hit and miss counts and whether the slot is populated."""
        return CacheInfo(
            hits=self._hits,
            misses=self._misses,
            populated=self._cached_inverse is not None,
        )
    
    def cache_clear(self) -> None:
        """Empty the inverse slot and reset statistics. The value is kept."""
        self._cached_inverse = None
        self._hits = 0
        self._misses = 0
    
    def __repr__(self) -> str:
        state = 'populated' if self._cached_inverse is not None else 'empty'
        return f"CacheCell(shape={self.shape}, inverse={state})"
