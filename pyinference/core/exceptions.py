"""
Exception hierarchy for PyInference.

All exceptions inherit from PyInferenceError so a caller can catch any
library-specific failure in one place. The host boundary (pyinference.host)
is the only code that turns these into plain error payloads.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyInferenceError(Exception):
    """Base exception for all PyInference errors."""
    pass


class ValidationError(PyInferenceError):
    """
    Input validation failed.

    Raised by design factories when user-provided samples or parameters
    (alpha, tail mode, hypothesized values) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Sample shapes are incorrect or inconsistent.

    Raised for non-1D samples, paired samples of different lengths, or
    grouped samples whose groups differ in size.
    """
    pass


class NumericalError(PyInferenceError):
    """
    A statistic is undefined for the given data.

    Raised when a formula would divide by a zero-valued variance estimate.

    Attributes:
        quantity: Name of the quantity that was zero (e.g. 'sd of y')
    """

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity
