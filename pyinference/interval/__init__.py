"""
Confidence intervals.

All intervals are two-sided with coverage 1 - alpha.

Public API:
    one_samp_z_interval(x, alpha)      - z-interval for a mean
    two_samp_z_interval(x, y, alpha)   - z-interval for a difference in means
    one_samp_t_interval(x, alpha)      - t-interval for a mean
    two_samp_t_interval(x, y, alpha)   - Welch t-interval for a difference
    two_samp_var_interval(x, y, alpha) - F-interval for a variance ratio
"""

from pyinference.interval.solvers import (
    one_samp_z_interval,
    two_samp_z_interval,
    one_samp_t_interval,
    two_samp_t_interval,
    two_samp_var_interval,
)
from pyinference.interval.design import IntervalDesign
from pyinference.interval._common import IntervalParams
from pyinference.interval.solution import IntervalSolution

__all__ = [
    "one_samp_z_interval",
    "two_samp_z_interval",
    "one_samp_t_interval",
    "two_samp_t_interval",
    "two_samp_var_interval",
    "IntervalDesign",
    "IntervalParams",
    "IntervalSolution",
]
