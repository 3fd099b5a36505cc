"""
Sample moments shared by every interval and test.

Pure numeric primitives: no validation happens here. Callers go through
a design factory first, which guarantees at least 2 finite observations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SampleMoments:
    """
    Summary of one sample.

    Attributes
    ----------
    n : int
        Number of observations.
    mean : float
        Arithmetic mean.
    variance : float
        Unbiased sample variance (n - 1 denominator).
    std_dev : float
        Square root of variance.
    """
    n: int
    mean: float
    variance: float
    std_dev: float

    @property
    def var_of_mean(self) -> float:
        """Squared standard error of the mean, s^2 / n."""
        return self.variance / self.n

    @property
    def std_error(self) -> float:
        """Standard error of the mean, s / sqrt(n)."""
        return self.std_dev / np.sqrt(self.n)


def sample_moments(x: NDArray[np.floating[Any]]) -> SampleMoments:
    """Count, mean and unbiased variance / sd of a 1D sample."""
    n = len(x)
    mean = float(np.sum(x) / n)
    variance = float(np.sum((x - mean) ** 2) / (n - 1))
    return SampleMoments(
        n=n,
        mean=mean,
        variance=variance,
        std_dev=float(np.sqrt(variance)),
    )


def welch_df(m1: SampleMoments, m2: SampleMoments) -> float:
    """
    Welch-Satterthwaite degrees of freedom for two independent samples.

    df = (v1 + v2)^2 / (v1^2 / (n1 - 1) + v2^2 / (n2 - 1)),  vi = si^2 / ni

    Fractional; never rounded. Returns 0.0 when both samples are constant.
    """
    v1 = m1.var_of_mean
    v2 = m2.var_of_mean
    denom = v1 ** 2 / (m1.n - 1) + v2 ** 2 / (m2.n - 1)
    if denom == 0.0:
        return 0.0
    return float((v1 + v2) ** 2 / denom)


def diff_std_error(m1: SampleMoments, m2: SampleMoments) -> float:
    """Standard error of mean1 - mean2, sqrt(s1^2/n1 + s2^2/n2)."""
    return float(np.sqrt(m1.var_of_mean + m2.var_of_mean))
