"""
PyInference: confidence intervals and parametric hypothesis tests.

Point estimates, confidence intervals and test statistics with p-values
for one or two samples, paired samples and grouped samples, using the
Normal, Student's t and Fisher-Snedecor reference distributions.

Submodules:
    descriptive: Sample moments and Welch-Satterthwaite df
    distributions: Reference distributions (cdf, sf, inverse_cdf)
    interval: z, t and variance-ratio confidence intervals
    hypothesis: z, t, paired, variance, ANOVA and regression tests
    host: Loosely typed boundary returning plain tuples and dicts
"""

__version__ = "0.1.0"

from pyinference import descriptive
from pyinference import distributions
from pyinference import interval
from pyinference import hypothesis

__all__ = [
    "__version__",
    "descriptive",
    "distributions",
    "interval",
    "hypothesis",
]
