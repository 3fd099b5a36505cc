"""
Common types for hypothesis testing.

Defines TestParams (the payload every test backend returns), the TailMode
enum, and the tail-probability conventions shared by all tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pyinference.core.exceptions import ValidationError


class TailMode(str, Enum):
    """Which side(s) of the reference distribution define the p-value."""
    TWO_SIDED = "two-sided"
    LESS = "less"
    GREATER = "greater"

    @classmethod
    def parse(cls, value: TailMode | str) -> TailMode:
        """Accept a member or its string value; anything else is invalid."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        valid = tuple(m.value for m in cls)
        raise ValidationError(
            f"Invalid test type: tails must be one of {valid}, got {value!r}"
        )


VALID_TAILS = tuple(m.value for m in TailMode)


@dataclass(frozen=True)
class TestParams:
    """
    Parameter payload for hypothesis tests.

    Every test returns this same structure; test-specific extras go in
    the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("z", "t", "F").
    parameter : dict or None
        Distribution parameters, e.g. {"df": 4} or
        {"num df": 1, "denom df": 8}. None for the z-test.
    p_value : float
        p-value of the test.
    tail : TailMode
        Tail the p-value was computed for.
    estimate : dict or None
        Point estimate(s), e.g. {"mean of x": 3.0}.
    null_value : dict or None
        Hypothesized value under H0, e.g. {"mean": 0.0}.
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific outputs (sample sizes and sds for the variance
        test, the sum-of-squares decomposition for ANOVA and regression).
    """
    __test__ = False  # not a pytest test class

    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    tail: TailMode
    estimate: dict[str, float] | None
    null_value: dict[str, float] | None
    method: str
    data_name: str
    extras: dict[str, Any] | None = None


def symmetric_pvalue(statistic: float, dist, tail: TailMode) -> float:
    """
    p-value for a statistic with a symmetric reference distribution (z, t).

    less: F(T); greater: 1 - F(T); two-sided: 2 * (1 - F(|T|)).
    """
    if tail is TailMode.LESS:
        return dist.cdf(statistic)
    if tail is TailMode.GREATER:
        return dist.sf(statistic)
    return 2.0 * dist.sf(abs(statistic))


def ratio_pvalue(statistic: float, dist, tail: TailMode) -> float:
    """
    p-value for a variance ratio under an F reference distribution.

    F is asymmetric on [0, inf), so the two-sided p-value doubles the
    smaller tail: 2 * min(F(T), 1 - F(T)).
    """
    if tail is TailMode.LESS:
        return dist.cdf(statistic)
    if tail is TailMode.GREATER:
        return dist.sf(statistic)
    return 2.0 * min(dist.cdf(statistic), dist.sf(statistic))
