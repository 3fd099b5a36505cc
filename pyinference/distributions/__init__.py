"""
Reference distributions.

Public API:
    Normal()                 - standard normal
    StudentT(df)             - Student's t, fractional df allowed
    FisherSnedecor(df1, df2) - F distribution

Each provides cdf(x), sf(x) and inverse_cdf(p).
"""

from pyinference.distributions._reference import (
    Normal,
    StudentT,
    FisherSnedecor,
)

__all__ = [
    "Normal",
    "StudentT",
    "FisherSnedecor",
]
