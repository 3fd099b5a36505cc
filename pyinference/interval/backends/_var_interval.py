"""
Confidence interval for the ratio of two population variances.

The statistic is always larger variance over smaller variance. Because the
interval divides the statistic by the F quantiles, the upper quantile gives
the lower bound and the lower quantile gives the upper bound.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyinference.core.exceptions import NumericalError
from pyinference.descriptive import sample_moments
from pyinference.distributions import FisherSnedecor
from pyinference.interval._common import IntervalParams

if TYPE_CHECKING:
    from pyinference.interval.design import IntervalDesign


def var_ratio(design: IntervalDesign) -> tuple[IntervalParams, list[str]]:
    """F-based interval for the variance ratio, df = (n1 - 1, n2 - 1)."""
    alpha = design.alpha
    m1 = sample_moments(design.x)
    m2 = sample_moments(design.y)
    df1 = float(m1.n - 1)
    df2 = float(m2.n - 1)

    smaller = min(m1.variance, m2.variance)
    if smaller == 0.0:
        raise NumericalError(
            "Division by zero: variance ratio is undefined when a sample "
            "variance is 0",
            quantity="smaller sample variance",
        )
    f_stat = max(m1.variance, m2.variance) / smaller

    dist = FisherSnedecor(df1, df2)
    f_lower = dist.inverse_cdf(alpha / 2.0)
    f_upper = dist.inverse_cdf(1.0 - alpha / 2.0)

    return IntervalParams(
        lower=f_stat / f_upper,
        upper=f_stat / f_lower,
        estimate=f_stat,
        estimate_name="ratio of variances",
        std_error=None,
        margin=None,
        critical_values=(f_lower, f_upper),
        parameter={"num df": df1, "denom df": df2},
        alpha=alpha,
        method="F interval for the ratio of two variances",
    ), []
