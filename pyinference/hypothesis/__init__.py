"""
Hypothesis testing module.

Public API:
    one_samp_z_test(x, tails, mu0)              - z-test for a mean
    one_samp_t_test(x, tails, mu0)              - t-test for a mean
    two_samp_t_test(x, y, delta0, tails)        - Welch two-sample t-test
    matched_pairs_t_test(x, y, delta0, tails)   - paired t-test
    variance_test(x, y, tails)                  - F-test for two variances
    anova_1way_test(groups)                     - one-way ANOVA
    regression_test(x, y)                       - simple regression F-test
"""

from pyinference.hypothesis.solvers import (
    one_samp_z_test,
    one_samp_t_test,
    two_samp_t_test,
    matched_pairs_t_test,
    variance_test,
    anova_1way_test,
    regression_test,
)
from pyinference.hypothesis.design import HypothesisDesign
from pyinference.hypothesis._common import TestParams, TailMode, VALID_TAILS
from pyinference.hypothesis.solution import TestSolution

__all__ = [
    "one_samp_z_test",
    "one_samp_t_test",
    "two_samp_t_test",
    "matched_pairs_t_test",
    "variance_test",
    "anova_1way_test",
    "regression_test",
    "HypothesisDesign",
    "TestParams",
    "TailMode",
    "VALID_TAILS",
    "TestSolution",
]
