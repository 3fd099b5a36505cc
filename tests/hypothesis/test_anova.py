"""
Tests for anova_1way_test() matching R aov() for balanced designs.

R: summary(aov(v ~ g)) with v = c(1:5, 2:6), g = gl(2, 5)
    Df Sum Sq Mean Sq F value Pr(>F)
g    1    2.5     2.5       1  0.347
Residuals 8   20.0     2.5
"""

import numpy as np
import pytest
from scipy import stats

from pyinference.core.exceptions import DimensionError, ValidationError
from pyinference.hypothesis import HypothesisDesign, anova_1way_test


GROUPS = [[1, 2, 3, 4, 5], [2, 3, 4, 5, 6]]


class TestAnovaOneway:

    def test_two_groups(self):
        result = anova_1way_test(GROUPS)
        assert result.statistic == pytest.approx(1.0, rel=1e-10)
        assert result.parameter == {"num df": 1.0, "denom df": 8.0}
        assert result.p_value == pytest.approx(0.3465935, rel=1e-5)
        assert result.method == "One-way analysis of variance"

    def test_sum_of_squares(self):
        extras = anova_1way_test(GROUPS).extras
        assert extras["ss_treatment"] == pytest.approx(2.5)
        assert extras["ss_total"] == pytest.approx(22.5)
        assert extras["ss_error"] == pytest.approx(20.0)
        assert extras["ms_error"] == pytest.approx(2.5)
        assert extras["grand_mean"] == pytest.approx(3.5)
        assert extras["k"] == 2
        assert extras["n"] == 5

    def test_three_groups(self):
        """
        Means 2, 5, 8: SS_treatment = 54, SS_error = 6, df = (2, 6), F = 27.
        For df1 = 2 the upper tail is (1 + 2F/df2)^(-df2/2) = 10^-3.
        """
        result = anova_1way_test([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert result.statistic == pytest.approx(27.0, rel=1e-10)
        assert result.parameter == {"num df": 2.0, "denom df": 6.0}
        assert result.p_value == pytest.approx(0.001, rel=1e-8)

    def test_matches_scipy(self, rng):
        groups = [rng.normal(mu, 1.0, 8) for mu in (0.0, 0.3, 1.0, 0.1)]
        result = anova_1way_test(groups)
        expected = stats.f_oneway(*groups)
        assert result.statistic == pytest.approx(expected.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(expected.pvalue, rel=1e-8)

    def test_two_group_equals_squared_t(self):
        """With two groups of equal size and variance, F = t^2."""
        from pyinference.hypothesis import two_samp_t_test
        t = two_samp_t_test(*GROUPS)
        f = anova_1way_test(GROUPS)
        assert f.statistic == pytest.approx(t.statistic ** 2)

    def test_always_upper_tail(self):
        result = anova_1way_test(GROUPS)
        assert result.tail.value == "greater"

    def test_ndarray_input(self):
        result = anova_1way_test(np.array(GROUPS, dtype=float))
        assert result.statistic == pytest.approx(1.0)

    def test_identical_groups(self):
        result = anova_1way_test([[1, 2, 3], [1, 2, 3]])
        assert result.statistic == pytest.approx(0.0, abs=1e-12)
        assert result.p_value == pytest.approx(1.0)

    def test_all_constant(self):
        result = anova_1way_test([[2, 2], [2, 2]])
        assert np.isnan(result.statistic)
        assert result._result.has_warning("residual sum of squares is zero")


class TestAnovaValidation:

    def test_unequal_group_sizes(self):
        with pytest.raises(DimensionError, match="equal group sizes"):
            anova_1way_test([[1, 2, 3], [4, 5]])

    def test_single_group(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            anova_1way_test([[1, 2, 3]])

    def test_empty_group(self):
        with pytest.raises(ValidationError, match=r"groups\[1\]: sample is empty"):
            anova_1way_test([[1, 2, 3], []])

    def test_not_a_sequence(self):
        with pytest.raises(ValidationError):
            anova_1way_test(5)

    def test_design_repr(self):
        design = HypothesisDesign.for_anova_oneway(GROUPS)
        assert repr(design) == "HypothesisDesign(test_type='anova_oneway', k=2, n=5)"
