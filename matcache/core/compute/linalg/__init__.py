"""
Linear algebra kernels for matcache.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    inverse: LU-based matrix inversion
"""

from matcache.core.compute.linalg.inverse import (
    InverseResult,
    inverse_cpu,
)

__all__ = [
    "InverseResult",
    "inverse_cpu",
]
