"""
Reference distributions for critical values and tail probabilities.

Thin frozen wrappers over scipy.stats. Each exposes the same three
evaluators so interval and test formulas are written once against
`dist.cdf`, `dist.sf` and `dist.inverse_cdf` regardless of family.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy import stats as sp_stats

from pyinference.core.exceptions import ValidationError


def _check_df(df: float, name: str) -> float:
    value = float(df)
    if math.isnan(value) or value <= 0.0:
        raise ValidationError(f"{name} must be positive, got {df}")
    return value


def _check_prob(p: float) -> float:
    value = float(p)
    if not (0.0 < value < 1.0):
        raise ValidationError(f"probability must be in (0, 1), got {p}")
    return value


@dataclass(frozen=True)
class Normal:
    """Standard normal N(0, 1). All statistics are standardized first."""

    name = "Normal"

    def cdf(self, x: float) -> float:
        return float(sp_stats.norm.cdf(x))

    def sf(self, x: float) -> float:
        """Upper tail 1 - cdf(x), without cancellation for large x."""
        return float(sp_stats.norm.sf(x))

    def inverse_cdf(self, p: float) -> float:
        return float(sp_stats.norm.ppf(_check_prob(p)))


@dataclass(frozen=True)
class StudentT:
    """
    Student's t with `df` degrees of freedom.

    df may be fractional (Welch-Satterthwaite).
    """
    df: float

    name = "Student's t"

    def __post_init__(self):
        object.__setattr__(self, 'df', _check_df(self.df, "df"))

    def cdf(self, x: float) -> float:
        return float(sp_stats.t.cdf(x, self.df))

    def sf(self, x: float) -> float:
        return float(sp_stats.t.sf(x, self.df))

    def inverse_cdf(self, p: float) -> float:
        return float(sp_stats.t.ppf(_check_prob(p), self.df))


@dataclass(frozen=True)
class FisherSnedecor:
    """Fisher-Snedecor F with numerator df1 and denominator df2."""
    df1: float
    df2: float

    name = "Fisher-Snedecor"

    def __post_init__(self):
        object.__setattr__(self, 'df1', _check_df(self.df1, "df1"))
        object.__setattr__(self, 'df2', _check_df(self.df2, "df2"))

    def cdf(self, x: float) -> float:
        return float(sp_stats.f.cdf(x, self.df1, self.df2))

    def sf(self, x: float) -> float:
        return float(sp_stats.f.sf(x, self.df1, self.df2))

    def inverse_cdf(self, p: float) -> float:
        return float(sp_stats.f.ppf(_check_prob(p), self.df1, self.df2))
