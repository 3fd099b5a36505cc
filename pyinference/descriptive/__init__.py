"""
Sample statistics.

Public API:
    sample_moments(x)       - n, mean, unbiased variance and sd
    welch_df(m1, m2)        - Welch-Satterthwaite degrees of freedom
    diff_std_error(m1, m2)  - standard error of a difference in means
"""

from pyinference.descriptive._moments import (
    SampleMoments,
    sample_moments,
    welch_df,
    diff_std_error,
)

__all__ = [
    "SampleMoments",
    "sample_moments",
    "welch_df",
    "diff_std_error",
]
