"""
matcache: memoized matrix inversion for Python.

Holds one matrix and its inverse in a single-slot cache, so repeated
inversion requests on an unchanged matrix are served without recomputing.

Submodules:
    cache: CacheCell and solve_with_cache
    core: Exceptions, validation, precision policy, linear algebra kernels
"""

__version__ = "0.1.0"

from matcache.cache import CacheCell, CacheInfo, solve_with_cache
from matcache.core import (
    InverseCache,
    MatCacheError,
    ValidationError,
    DimensionError,
    NonInvertibleInputError,
    NumericalError,
    SingularMatrixError,
    ComputationError,
)

__all__ = [
    "__version__",
    "CacheCell",
    "CacheInfo",
    "solve_with_cache",
    "InverseCache",
    "MatCacheError",
    "ValidationError",
    "DimensionError",
    "NonInvertibleInputError",
    "NumericalError",
    "SingularMatrixError",
    "ComputationError",
]
