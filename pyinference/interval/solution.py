"""
Confidence interval solution types.

IntervalSolution wraps Result[IntervalParams] and renders a text summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyinference.core.result import Result
from pyinference.interval._common import IntervalParams

if TYPE_CHECKING:
    from pyinference.interval.design import IntervalDesign


@dataclass
class IntervalSolution:
    """
    User-facing confidence interval.

    Wraps Result[IntervalParams]; `bounds` is the (lower, upper) pair the
    host boundary hands back to callers.
    """
    _result: Result[IntervalParams]
    _design: 'IntervalDesign | None'

    @property
    def lower(self) -> float:
        return self._result.params.lower

    @property
    def upper(self) -> float:
        return self._result.params.upper

    @property
    def bounds(self) -> tuple[float, float]:
        """(lower, upper)."""
        p = self._result.params
        return (p.lower, p.upper)

    @property
    def estimate(self) -> float:
        """Point estimate at the centre (or, for variance ratios, inside) of the interval."""
        return self._result.params.estimate

    @property
    def estimate_name(self) -> str:
        return self._result.params.estimate_name

    @property
    def std_error(self) -> float | None:
        return self._result.params.std_error

    @property
    def margin(self) -> float | None:
        """Margin of error; None for the variance ratio."""
        return self._result.params.margin

    @property
    def critical_values(self) -> tuple[float, ...]:
        return self._result.params.critical_values

    @property
    def parameter(self) -> dict[str, float] | None:
        return self._result.params.parameter

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def conf_level(self) -> float:
        return 1.0 - self._result.params.alpha

    @property
    def method(self) -> str:
        return self._result.params.method

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
        Format as a short report:

            One Sample t-interval

        data:  x
        df = 4
        95 percent confidence interval:
         1.036757  4.963243
        sample estimate:
        mean of x
                3
        """
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        data_name = self._design.data_name if self._design is not None else "x"
        lines.append(f"data:  {data_name}")
        if p.parameter is not None:
            lines.append(", ".join(f"{k} = {v:.5g}" for k, v in p.parameter.items()))
        pct = round((1.0 - p.alpha) * 100, 6)
        lines.append(f"{pct:g} percent confidence interval:")
        lines.append(f" {p.lower:.7g}  {p.upper:.7g}")
        lines.append("sample estimate:")
        lines.append(p.estimate_name)
        lines.append(f"{p.estimate:>{len(p.estimate_name)}.7g}")
        for w in self._result.warnings:
            lines.append(f"Warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"IntervalSolution(method={p.method!r}, "
            f"lower={p.lower:.4g}, upper={p.upper:.4g})"
        )
