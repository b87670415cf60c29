"""
Compute-or-fetch access to a cell's inverse.

This module provides solve_with_cache(), the public entry point that
combines cache lookup and computation.
"""

from typing import Any
import logging

import numpy as np
from numpy.typing import NDArray

from matcache.cache.cell import CacheCell
from matcache.core.compute.linalg import inverse_cpu
from matcache.core.exceptions import ComputationError, MatCacheError
from matcache.core.precision import CACHE_DECIMALS, round_inverse
from matcache.core.protocols import InverseCache

logger = logging.getLogger(__name__)


def solve_with_cache(cell: InverseCache) -> NDArray[np.floating[Any]]:
    """
    Return the inverse of the matrix held by a cell.
    
    On a cache hit the stored inverse is returned as is and an INFO record
    is logged; the stored matrix is not read. On a miss the inverse is
    computed, rounded to CACHE_DECIMALS decimals, stored in the cell and
    returned. The rounded value is the cached artifact, so the first and
    every later call return the same numbers.
    
    Args:
        cell: Any object implementing the InverseCache protocol
        
    Returns:
        Rounded inverse (n x n)
        
    Raises:
        ComputationError: If the stored matrix cannot be inverted. Values
            are checked on the way into a cell, so this signals a bug.
    
    Example:
        >>> cell = CacheCell([[2, 0], [0, 2]])
        >>> solve_with_cache(cell)      # computed
        >>> solve_with_cache(cell)      # logs "getting cached inverse"
    """
    cached = cell.get_cached_inverse()
    if cached is not None:
        logger.info("getting cached inverse")
        if isinstance(cell, CacheCell):
            cell._record_hit()
        return cached
    
    value = np.asarray(cell.get_value(), dtype=np.float64)
    try:
        result = inverse_cpu(value, 'value')
    except MatCacheError as e:
        raise ComputationError(
            f"Failed to invert stored matrix of shape {value.shape}: {e}",
            shape=value.shape,
        ) from e
    
    inverse = round_inverse(result.inverse, CACHE_DECIMALS)
    inverse.flags.writeable = False
    cell.set_cached_inverse(inverse)
    if isinstance(cell, CacheCell):
        cell._record_miss()
    return inverse
