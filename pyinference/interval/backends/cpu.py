"""
CPU reference backend for confidence intervals.

Dispatches to interval-specific submodules based on design.kind.
"""

from __future__ import annotations

from pyinference.core.result import Result
from pyinference.core.compute.timing import Timer
from pyinference.interval._common import IntervalParams
from pyinference.interval.design import IntervalDesign


class CPUIntervalBackend:
    """CPU reference backend for confidence intervals."""

    @property
    def name(self) -> str:
        return 'cpu_interval'

    def solve(self, design: IntervalDesign) -> Result[IntervalParams]:
        """Dispatch to the interval implementation named by design.kind."""
        timer = Timer()
        timer.start()

        kind = design.kind

        with timer.section(kind):
            if kind == "z_one_sample":
                from pyinference.interval.backends._mean_interval import z_one_sample
                params, warnings_list = z_one_sample(design)
            elif kind == "z_two_sample":
                from pyinference.interval.backends._mean_interval import z_two_sample
                params, warnings_list = z_two_sample(design)
            elif kind == "t_one_sample":
                from pyinference.interval.backends._mean_interval import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif kind == "t_two_sample":
                from pyinference.interval.backends._mean_interval import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif kind == "var_ratio":
                from pyinference.interval.backends._var_interval import var_ratio
                params, warnings_list = var_ratio(design)
            else:
                raise ValueError(f"Unknown interval kind: {kind!r}")

        timer.stop()

        info = {'kind': kind, 'n_x': len(design.x)}
        if design.y is not None:
            info['n_y'] = len(design.y)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
