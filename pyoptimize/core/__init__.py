"""
Core infrastructure for PyOptimize.

This module provides shared abstractions and utilities used by the
optimization driver.

Key components:
    protocols: ObjectiveModel, Minimizer protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and finite-difference derivatives
"""

from pyoptimize.core.protocols import ObjectiveModel, Minimizer, Clock
from pyoptimize.core.result import Result
from pyoptimize.core.exceptions import (
    PyOptimizeError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "ObjectiveModel",
    "Minimizer",
    "Clock",
    # Result
    "Result",
    # Exceptions
    "PyOptimizeError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
