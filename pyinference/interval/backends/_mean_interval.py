"""
z- and t-intervals for a mean or a difference in means.

All intervals are two-sided: estimate +/- q(1 - alpha/2) * se.
The two-sample t-interval uses Welch-Satterthwaite degrees of freedom.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from pyinference.descriptive import sample_moments, welch_df, diff_std_error
from pyinference.distributions import Normal, StudentT
from pyinference.interval._common import IntervalParams

if TYPE_CHECKING:
    from pyinference.interval.design import IntervalDesign


def z_one_sample(design: IntervalDesign) -> tuple[IntervalParams, list[str]]:
    """Normal-theory interval for the mean of x."""
    m = sample_moments(design.x)
    z_crit = Normal().inverse_cdf(1.0 - design.alpha / 2.0)
    return _symmetric(
        m.mean, "mean of x", m.std_error, z_crit, None,
        design.alpha, "One Sample z-interval",
    )


def z_two_sample(design: IntervalDesign) -> tuple[IntervalParams, list[str]]:
    """Normal-theory interval for mean(x) - mean(y)."""
    m1 = sample_moments(design.x)
    m2 = sample_moments(design.y)
    z_crit = Normal().inverse_cdf(1.0 - design.alpha / 2.0)
    return _symmetric(
        m1.mean - m2.mean, "difference in means", diff_std_error(m1, m2),
        z_crit, None, design.alpha, "Two Sample z-interval",
    )


def t_one_sample(design: IntervalDesign) -> tuple[IntervalParams, list[str]]:
    """Student's t interval for the mean of x, df = n - 1."""
    m = sample_moments(design.x)
    df = float(m.n - 1)
    t_crit = StudentT(df).inverse_cdf(1.0 - design.alpha / 2.0)
    return _symmetric(
        m.mean, "mean of x", m.std_error, t_crit, {"df": df},
        design.alpha, "One Sample t-interval",
    )


def t_two_sample(design: IntervalDesign) -> tuple[IntervalParams, list[str]]:
    """Welch interval for mean(x) - mean(y)."""
    m1 = sample_moments(design.x)
    m2 = sample_moments(design.y)
    se = diff_std_error(m1, m2)
    df = welch_df(m1, m2)
    # Both samples constant: df is 0 and the t distribution is undefined
    if df > 0.0:
        t_crit = StudentT(df).inverse_cdf(1.0 - design.alpha / 2.0)
    else:
        t_crit = np.nan
    return _symmetric(
        m1.mean - m2.mean, "difference in means", se, t_crit, {"df": df},
        design.alpha, "Welch Two Sample t-interval",
    )


# --- Helpers ---

def _symmetric(
    estimate: float,
    estimate_name: str,
    se: float,
    crit: float,
    parameter: dict[str, float] | None,
    alpha: float,
    method: str,
) -> tuple[IntervalParams, list[str]]:
    warnings_list: list[str] = []
    if se == 0.0:
        warnings_list.append("data are essentially constant")
        margin = 0.0
    else:
        margin = float(crit * se)

    return IntervalParams(
        lower=float(estimate - margin),
        upper=float(estimate + margin),
        estimate=float(estimate),
        estimate_name=estimate_name,
        std_error=float(se),
        margin=margin,
        critical_values=(float(crit),),
        parameter=parameter,
        alpha=alpha,
        method=method,
    ), warnings_list
