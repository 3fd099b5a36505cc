"""
Common types for confidence intervals.

Defines IntervalParams, the payload every interval backend returns inside
a Result envelope, and the default significance level.
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_ALPHA = 0.05


@dataclass(frozen=True)
class IntervalParams:
    """
    Parameter payload for confidence intervals.

    Attributes
    ----------
    lower, upper : float
        Interval bounds. lower <= upper for valid inputs.
    estimate : float
        Point estimate (mean, difference in means, or variance ratio).
    estimate_name : str
        What the estimate is, e.g. "difference in means".
    std_error : float or None
        Standard error of the estimate. None for the variance ratio.
    margin : float or None
        critical value * std_error. None for the variance ratio.
    critical_values : tuple of float
        Quantiles used: one value for z/t intervals, (lower, upper)
        quantiles for the variance ratio.
    parameter : dict or None
        Reference distribution parameters, e.g. {"df": 4.0}.
    alpha : float
        Significance level; coverage is 1 - alpha.
    method : str
        Human-readable method name.
    """
    lower: float
    upper: float
    estimate: float
    estimate_name: str
    std_error: float | None
    margin: float | None
    critical_values: tuple[float, ...]
    parameter: dict[str, float] | None
    alpha: float
    method: str
