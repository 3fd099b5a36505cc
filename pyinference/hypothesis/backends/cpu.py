"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pyinference.core.result import Result
from pyinference.core.compute.timing import Timer
from pyinference.hypothesis._common import TestParams
from pyinference.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[TestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "z_one_sample":
                from pyinference.hypothesis.backends._t_test import z_one_sample
                params, warnings_list = z_one_sample(design)
            elif test_type == "t_one_sample":
                from pyinference.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "t_two_sample":
                from pyinference.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "t_paired":
                from pyinference.hypothesis.backends._t_test import t_paired
                params, warnings_list = t_paired(design)
            elif test_type == "var_test":
                from pyinference.hypothesis.backends._var_test import var_test
                params, warnings_list = var_test(design)
            elif test_type == "anova_oneway":
                from pyinference.hypothesis.backends._f_test import anova_oneway
                params, warnings_list = anova_oneway(design)
            elif test_type == "regression":
                from pyinference.hypothesis.backends._f_test import regression
                params, warnings_list = regression(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
