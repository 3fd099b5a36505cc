"""
Solver dispatch for hypothesis tests.

Provides one_samp_z_test(), one_samp_t_test(), two_samp_t_test(),
matched_pairs_t_test(), variance_test(), anova_1way_test() and
regression_test(). Each accepts raw samples or a pre-built
HypothesisDesign.
"""

from __future__ import annotations

from typing import Literal, Sequence, Union
from numpy.typing import ArrayLike

from pyinference.core.exceptions import ValidationError
from pyinference.hypothesis._common import TailMode
from pyinference.hypothesis.design import HypothesisDesign
from pyinference.hypothesis.solution import TestSolution
from pyinference.hypothesis.backends.cpu import CPUHypothesisBackend


Tails = Union[TailMode, Literal["two-sided", "less", "greater"]]


def _get_backend(backend: str = 'cpu'):
    """Select backend for hypothesis tests. Only CPU exists."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def _solve(design: HypothesisDesign, backend: str) -> TestSolution:
    be = _get_backend(backend)
    result = be.solve(design)
    return TestSolution(_result=result, _design=design)


def one_samp_z_test(
    x: ArrayLike | HypothesisDesign,
    tails: Tails = "two-sided",
    mu0: float = 0.0,
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    One-sample z-test with the standard deviation estimated from x.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data, at least 2 observations.
    tails : str or TailMode
        "two-sided" (default), "less", or "greater".
    mu0 : float
        Hypothesized mean. Default 0.
    backend : str
        'cpu' (default).

    Returns
    -------
    TestSolution
        z = (mean - mu0) / (sd / sqrt(n)) and its Normal p-value.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_z_test(x, tails=tails, mu0=mu0)
    return _solve(design, backend)


def one_samp_t_test(
    x: ArrayLike | HypothesisDesign,
    tails: Tails = "two-sided",
    mu0: float = 0.0,
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    One-sample t-test, df = n - 1.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data, at least 2 observations.
    tails : str or TailMode
        "two-sided" (default), "less", or "greater".
    mu0 : float
        Hypothesized mean. Default 0.
    backend : str
        'cpu' (default).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_test(x, tails=tails, mu=mu0)
    return _solve(design, backend)


def two_samp_t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    delta0: float = 0.0,
    tails: Tails = "two-sided",
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    Welch two-sample t-test.

    t = (mean(x) - mean(y) - delta0) / sqrt(s1^2/n1 + s2^2/n2), with
    Welch-Satterthwaite degrees of freedom.

    Parameters
    ----------
    x, y : array-like
        Independent samples, at least 2 observations each.
    delta0 : float
        Hypothesized difference in means. Default 0.
    tails : str or TailMode
        "two-sided" (default), "less", or "greater".
    backend : str
        'cpu' (default).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for two_samp_t_test")
        design = HypothesisDesign.for_t_test(x, y, tails=tails, mu=delta0)
    return _solve(design, backend)


def matched_pairs_t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    delta0: float = 0.0,
    tails: Tails = "two-sided",
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    Matched-pairs t-test: a one-sample t-test on d = x - y.

    x and y must have the same length. delta0 is the hypothesized mean
    difference.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for matched_pairs_t_test")
        design = HypothesisDesign.for_t_test(
            x, y, tails=tails, mu=delta0, paired=True,
        )
    return _solve(design, backend)


def variance_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    tails: Tails = "two-sided",
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    F-test to compare two variances.

    F = var(x) / var(y) against F(n1 - 1, n2 - 1). The two-sided p-value
    is 2 * min(cdf(F), 1 - cdf(F)).

    Raises
    ------
    NumericalError
        If the standard deviation of y is zero.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for variance_test")
        design = HypothesisDesign.for_var_test(x, y, tails=tails)
    return _solve(design, backend)


def anova_1way_test(
    groups: Sequence[ArrayLike] | HypothesisDesign,
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    One-way analysis of variance for equal-size groups.

    The p-value is always upper-tailed.

    Parameters
    ----------
    groups : sequence of array-like or HypothesisDesign
        At least 2 groups of equal size.
    backend : str
        'cpu' (default).
    """
    if isinstance(groups, HypothesisDesign):
        design = groups
    else:
        design = HypothesisDesign.for_anova_oneway(groups)
    return _solve(design, backend)


def regression_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    backend: str = 'cpu',
) -> TestSolution:
    """
    F-test for the slope of a simple linear regression of y on x.

    df = (1, n - 2); the p-value is always upper-tailed. The fitted
    intercept and slope are reported in `estimate`.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for regression_test")
        design = HypothesisDesign.for_regression(x, y)
    return _solve(design, backend)
