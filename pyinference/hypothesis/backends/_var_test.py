"""
F-test for equality of two variances.

F = s1^2 / s2^2 against Fisher-Snedecor(n1 - 1, n2 - 1). The two-sided
p-value doubles the smaller tail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyinference.core.exceptions import NumericalError
from pyinference.descriptive import sample_moments
from pyinference.distributions import FisherSnedecor
from pyinference.hypothesis._common import TestParams, ratio_pvalue

if TYPE_CHECKING:
    from pyinference.hypothesis.design import HypothesisDesign


def var_test(design: HypothesisDesign) -> tuple[TestParams, list[str]]:
    """F-test for equality of two variances."""
    m1 = sample_moments(design.x)
    m2 = sample_moments(design.y)

    if m2.std_dev == 0.0:
        raise NumericalError(
            "Division by zero: standard deviation of y is 0, "
            "variance ratio is undefined",
            quantity="sd of y",
        )

    df1 = float(m1.n - 1)
    df2 = float(m2.n - 1)
    f_stat = m1.variance / m2.variance
    p_value = ratio_pvalue(f_stat, FisherSnedecor(df1, df2), design.tail)

    return TestParams(
        statistic=f_stat,
        statistic_name="F",
        parameter={"num df": df1, "denom df": df2},
        p_value=p_value,
        tail=design.tail,
        estimate={"ratio of variances": f_stat},
        null_value={"ratio of variances": 1.0},
        method="F test to compare two variances",
        data_name=design.data_name,
        extras={
            "n1": m1.n,
            "n2": m2.n,
            "s1": m1.std_dev,
            "s2": m2.std_dev,
        },
    ), []
