"""
Solver dispatch for confidence intervals.

Provides one_samp_z_interval(), two_samp_z_interval(),
one_samp_t_interval(), two_samp_t_interval() and two_samp_var_interval().
Each accepts raw samples or a pre-built IntervalDesign.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pyinference.core.exceptions import ValidationError
from pyinference.interval._common import DEFAULT_ALPHA
from pyinference.interval.design import IntervalDesign
from pyinference.interval.solution import IntervalSolution
from pyinference.interval.backends.cpu import CPUIntervalBackend


def _get_backend(backend: str = 'cpu'):
    """Select backend for confidence intervals. Only CPU exists."""
    if backend in ('cpu', 'auto'):
        return CPUIntervalBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def _solve(design: IntervalDesign, backend: str) -> IntervalSolution:
    be = _get_backend(backend)
    result = be.solve(design)
    return IntervalSolution(_result=result, _design=design)


def one_samp_z_interval(
    x: ArrayLike | IntervalDesign,
    alpha: float = DEFAULT_ALPHA,
    *,
    backend: str = 'cpu',
) -> IntervalSolution:
    """
    Normal-theory confidence interval for a population mean.

    Parameters
    ----------
    x : array-like or IntervalDesign
        Sample, at least 2 observations.
    alpha : float
        Significance level; the interval covers 1 - alpha. Default 0.05.
    backend : str
        'cpu' (default).

    Returns
    -------
    IntervalSolution
        mean(x) -/+ z(1 - alpha/2) * sd(x) / sqrt(n)
    """
    if isinstance(x, IntervalDesign):
        design = x
    else:
        design = IntervalDesign.for_z_interval(x, alpha=alpha)
    return _solve(design, backend)


def two_samp_z_interval(
    x: ArrayLike | IntervalDesign,
    y: ArrayLike | None = None,
    alpha: float = DEFAULT_ALPHA,
    *,
    backend: str = 'cpu',
) -> IntervalSolution:
    """
    Normal-theory confidence interval for mean(x) - mean(y).

    Standard error is sqrt(s1^2/n1 + s2^2/n2).
    """
    if isinstance(x, IntervalDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for two_samp_z_interval")
        design = IntervalDesign.for_z_interval(x, y, alpha=alpha)
    return _solve(design, backend)


def one_samp_t_interval(
    x: ArrayLike | IntervalDesign,
    alpha: float = DEFAULT_ALPHA,
    *,
    backend: str = 'cpu',
) -> IntervalSolution:
    """
    Student's t confidence interval for a population mean, df = n - 1.

    Parameters
    ----------
    x : array-like or IntervalDesign
        Sample, at least 2 observations.
    alpha : float
        Significance level. Default 0.05.
    backend : str
        'cpu' (default).
    """
    if isinstance(x, IntervalDesign):
        design = x
    else:
        design = IntervalDesign.for_t_interval(x, alpha=alpha)
    return _solve(design, backend)


def two_samp_t_interval(
    x: ArrayLike | IntervalDesign,
    y: ArrayLike | None = None,
    alpha: float = DEFAULT_ALPHA,
    *,
    backend: str = 'cpu',
) -> IntervalSolution:
    """
    Welch confidence interval for mean(x) - mean(y).

    Degrees of freedom come from the Welch-Satterthwaite approximation
    and are not rounded.
    """
    if isinstance(x, IntervalDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for two_samp_t_interval")
        design = IntervalDesign.for_t_interval(x, y, alpha=alpha)
    return _solve(design, backend)


def two_samp_var_interval(
    x: ArrayLike | IntervalDesign,
    y: ArrayLike | None = None,
    alpha: float = DEFAULT_ALPHA,
    *,
    backend: str = 'cpu',
) -> IntervalSolution:
    """
    Confidence interval for the ratio of two variances.

    The estimate is max(var) / min(var); the bounds are
    estimate / F(1 - alpha/2) and estimate / F(alpha/2) with
    df = (n1 - 1, n2 - 1).

    Raises
    ------
    NumericalError
        If the smaller sample variance is zero.
    """
    if isinstance(x, IntervalDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for two_samp_var_interval")
        design = IntervalDesign.for_var_interval(x, y, alpha=alpha)
    return _solve(design, backend)
