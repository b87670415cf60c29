"""
Core infrastructure for matcache.

Key components:
    protocols: InverseCache protocol
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Rounding and pivot tolerance policy
    compute: Linear algebra kernels
"""

from matcache.core.protocols import InverseCache
from matcache.core.exceptions import (
    MatCacheError,
    ValidationError,
    DimensionError,
    NonInvertibleInputError,
    NumericalError,
    SingularMatrixError,
    ComputationError,
)

__all__ = [
    # Protocols
    "InverseCache",
    # Exceptions
    "MatCacheError",
    "ValidationError",
    "DimensionError",
    "NonInvertibleInputError",
    "NumericalError",
    "SingularMatrixError",
    "ComputationError",
]
