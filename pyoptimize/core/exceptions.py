"""
Exception hierarchy for PyOptimize.

All exceptions inherit from PyOptimizeError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyOptimizeError(Exception):
    """Base exception for all PyOptimize errors."""
    pass


class ValidationError(PyOptimizeError):
    """
    Input validation failed.

    Raised when user-provided inputs (start vector, bounds, loop counts,
    objective capabilities) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when the start vector and bound vectors don't share a length,
    or when a vector is not 1-dimensional.
    """
    pass


class NumericalError(PyOptimizeError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a Newton step needs to solve H · step = g but the
    Hessian approximation cannot be factorized.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        step: Index of the Newton step that failed, if applicable
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        step: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.step = step
