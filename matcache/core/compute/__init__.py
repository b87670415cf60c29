"""
Shared compute infrastructure for matcache.

Submodules:
    linalg: Linear algebra kernels (LU inversion)
"""

from matcache.core.compute.linalg import InverseResult, inverse_cpu

__all__ = [
    "InverseResult",
    "inverse_cpu",
]
