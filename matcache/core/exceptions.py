"""
Exception hierarchy for matcache.

All exceptions inherit from MatCacheError to allow catching any
library-specific error.

Two kinds of failure matter to callers:
    - ValidationError and its subclasses are recoverable. They are raised
      before any state changes, so the caller may retry with other input.
    - NumericalError and its subclasses come out of the linear algebra
      kernels. ComputationError in particular means a stored matrix could
      not be inverted after it was accepted, which points at a bug.

Exceptions carry diagnostic information as attributes and are re-raised
with ``from`` so the original cause is never lost.
"""


class MatCacheError(Exception):
    """Base exception for all matcache errors."""
    pass


class ValidationError(MatCacheError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.
    
    Raised when an array does not have the number of dimensions or the
    shape an operation requires.
    """
    pass


class NonInvertibleInputError(ValidationError):
    """
    Candidate matrix cannot be inverted.
    
    Raised by CacheCell when a new value is not square or is singular.
    The cell is left exactly as it was.
    
    Attributes:
        shape: Shape of the rejected matrix
        reason: 'not_square' or 'singular'
        rank: Numerical rank, if computed
    """
    
    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        reason: str | None = None,
        rank: int | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.reason = reason
        self.rank = rank


class NumericalError(MatCacheError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised by the inversion kernel when an LU pivot falls at or below the
    rank tolerance.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivots above tolerance, if computed
        expected_rank: Expected rank (the matrix order)
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class ComputationError(NumericalError):
    """
    Inverting an accepted matrix failed.
    
    Raised by solve_with_cache when the solver fails on the value stored in
    a cell. Values only get into a cell after passing the invertibility
    check, so this is never expected in normal operation.
    
    Attributes:
        shape: Shape of the matrix that failed to invert
    """
    
    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape
