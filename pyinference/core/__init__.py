"""
Core infrastructure for PyInference.

Shared abstractions used by every domain subpackage (descriptive,
distributions, interval, hypothesis).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from pyinference.core.result import Result
from pyinference.core.exceptions import (
    PyInferenceError,
    ValidationError,
    DimensionError,
    NumericalError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyInferenceError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
]
