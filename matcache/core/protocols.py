"""
Core protocols for matcache.

We use Protocol (structural typing) rather than ABC (nominal typing) so any
object exposing the four cell operations can be handed to solve_with_cache.
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray


@runtime_checkable
class InverseCache(Protocol):
    """
    A single matrix together with a slot for its memoized inverse.
    
    Implementations must clear the inverse slot whenever the matrix is
    replaced, so that a populated slot always belongs to the current matrix.
    """
    
    def get_value(self) -> NDArray[np.floating[Any]]:
        """Return the stored matrix."""
        ...
    
    def set_value(self, y: ArrayLike) -> None:
        """
        Replace the stored matrix and clear the inverse slot.
        
        Raises:
            NonInvertibleInputError: If y is not square or is singular.
                The stored state must be left unchanged.
        """
        ...
    
    def get_cached_inverse(self) -> NDArray[np.floating[Any]] | None:
        """Return the memoized inverse, or None if the slot is empty."""
        ...
    
    def set_cached_inverse(self, s: ArrayLike | None) -> None:
        """Store s in the inverse slot without validation."""
        ...
