"""
Memoized matrix inversion.

Public API:
    CacheCell(x) -> cell holding one matrix and its cached inverse
    solve_with_cache(cell) -> inverse, computed once per value

Example:
    >>> from matcache.cache import CacheCell, solve_with_cache
    >>> cell = CacheCell([[2, 0], [0, 2]])
    >>> solve_with_cache(cell)
    >>> cell.set_value([[4, 7], [2, 6]])
    >>> solve_with_cache(cell)
"""

from matcache.cache.cell import CacheCell, CacheInfo
from matcache.cache.solvers import solve_with_cache

__all__ = [
    "CacheCell",
    "CacheInfo",
    "solve_with_cache",
]
