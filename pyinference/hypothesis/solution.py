"""
Hypothesis test solution types.

TestSolution wraps Result[TestParams] and renders an R-style htest report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np

from pyinference.core.result import Result
from pyinference.hypothesis._common import TestParams, TailMode

if TYPE_CHECKING:
    from pyinference.hypothesis.design import HypothesisDesign


@dataclass
class TestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[TestParams] and provides R's print.htest output format
    via summary(). All standard fields are available as properties.
    """
    __test__ = False  # not a pytest test class

    _result: Result[TestParams]
    _design: 'HypothesisDesign | None'

    # --- Standard fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic ('z', 't', 'F')."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 4})."""
        return self._result.params.parameter

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def tail(self) -> TailMode:
        return self._result.params.tail

    @property
    def estimate(self) -> dict[str, float] | None:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        """Hypothesized value under H0."""
        return self._result.params.null_value

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:
            Welch Two Sample t-test

        data:  x and y
        t = -1, df = 8, p-value = 0.3466
        alternative hypothesis: true difference in means is not equal to 0
        sample estimates:
             mean of x      mean of y
                     3              4
        """
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        if p.null_value:
            nv_name = next(iter(p.null_value.keys()))
            nv_val = next(iter(p.null_value.values()))
            relation = {
                TailMode.TWO_SIDED: "is not equal to",
                TailMode.LESS: "is less than",
                TailMode.GREATER: "is greater than",
            }[p.tail]
            lines.append(
                f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}"
            )

        if p.estimate:
            lines.append("sample estimates:")
            lines.append(" ".join(f"{n:>14s}" for n in p.estimate))
            lines.append(" ".join(f"{v:14.7g}" for v in p.estimate.values()))

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if np.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
