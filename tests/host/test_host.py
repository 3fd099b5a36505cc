"""
Tests for the host boundary.

Loosely typed inputs are filtered to numbers; intervals come back as
(lower, upper) or None and tests as {"<stat>": value, "p": value} or
{"error": message}.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyinference import host


X = [1, 2, 3, 4, 5]
Y = [2, 3, 4, 5, 6]


class TestConversion:

    def test_non_numeric_entries_dropped(self):
        v = host.to_vector([1, "a", 2, None, 3.5, True, [4], {"k": 1}])
        assert v.dtype == np.float64
        np.testing.assert_array_equal(v, [1.0, 2.0, 3.5])

    def test_numpy_input(self):
        v = host.to_vector(np.array([1, 2, 3], dtype=np.int64))
        np.testing.assert_array_equal(v, [1.0, 2.0, 3.0])

    def test_complex_array_not_truncated(self):
        v = host.to_vector(np.array([1 + 2j, 3 + 0j]))
        assert v.shape == (0,)

    def test_bool_array_dropped(self):
        assert host.to_vector(np.array([True, False])).shape == (0,)

    def test_paired_drops_whole_pair(self):
        x, y = host.to_paired_vectors([1, None, 3, 4, 5], [2, 3, None, 5, 9])
        np.testing.assert_array_equal(x, [1.0, 4.0, 5.0])
        np.testing.assert_array_equal(y, [2.0, 5.0, 9.0])

    def test_paired_unequal_lengths_filtered_separately(self):
        x, y = host.to_paired_vectors([1, "a", 2], [3, 4])
        np.testing.assert_array_equal(x, [1.0, 2.0])
        np.testing.assert_array_equal(y, [3.0, 4.0])

    @pytest.mark.parametrize("value", [None, 5, "12345", {"a": 1}])
    def test_not_a_sequence(self, value):
        assert host.to_vector(value).shape == (0,)

    def test_nested(self):
        groups = host.to_nested_vectors([[1, 2], ["x", 3, 4], "bad"])
        assert len(groups) == 3
        np.testing.assert_array_equal(groups[1], [3.0, 4.0])
        assert groups[2].shape == (0,)

    @pytest.mark.parametrize("value, expected", [
        (None, 0.05),
        ("abc", 0.05),
        (float("nan"), 0.05),
        (True, 0.05),
        ("0.1", 0.1),
        (0.01, 0.01),
    ])
    def test_parse_alpha(self, value, expected):
        assert host.parse_alpha(value) == expected


class TestIntervals:

    def test_one_samp_z(self):
        assert_allclose(host.one_samp_z_interval(X), [1.614096, 4.385904], rtol=1e-6)

    def test_two_samp_z(self):
        assert_allclose(host.two_samp_z_interval(X, Y), [-2.959964, 0.959964], rtol=1e-6)

    def test_one_samp_t(self):
        assert_allclose(host.one_samp_t_interval(X, 0.05), [1.036757, 4.963243], rtol=1e-6)

    def test_two_samp_t(self):
        assert_allclose(host.two_samp_t_interval(X, Y), [-3.306004, 1.306004], rtol=1e-6)

    def test_var(self):
        assert_allclose(
            host.two_samp_var_interval(X, Y),
            [0.10411753745392764, 9.604529883],
            rtol=1e-6,
        )

    def test_filtering_matches_clean_input(self):
        dirty = [1, "two", 2, None, 3, False, 4, 5]
        assert host.one_samp_t_interval(dirty) == host.one_samp_t_interval(X)

    def test_default_alpha_when_unparseable(self):
        assert host.one_samp_t_interval(X, "not a number") == host.one_samp_t_interval(X)

    def test_empty_returns_none(self):
        assert host.one_samp_z_interval([]) is None
        assert host.two_samp_t_interval(X, ["a", "b"]) is None

    def test_single_observation_returns_none(self):
        assert host.one_samp_t_interval([3]) is None

    def test_alpha_out_of_range_returns_none(self):
        assert host.one_samp_t_interval(X, 1.5) is None

    def test_zero_variance_returns_none(self):
        assert host.two_samp_var_interval(X, [2, 2, 2]) is None

    def test_returns_plain_tuple(self):
        bounds = host.one_samp_t_interval(X)
        assert isinstance(bounds, tuple)
        assert len(bounds) == 2


class TestTests:

    def test_one_samp_t(self):
        out = host.one_samp_t_test(X, "two-sided", 0)
        assert set(out) == {"t", "p"}
        assert out["t"] == pytest.approx(4.2426406871192848, rel=1e-10)
        assert out["p"] == pytest.approx(0.013235599563682695, rel=1e-10)

    def test_one_samp_z(self):
        out = host.one_samp_z_test(X, "greater", 0)
        assert set(out) == {"z", "p"}
        assert out["p"] == pytest.approx(1.105e-5, rel=1e-2)

    def test_mu0_defaults_to_zero(self):
        assert host.one_samp_t_test(X, "less") == host.one_samp_t_test(X, "less", 0)

    def test_two_samp_t(self):
        out = host.two_samp_t_test(X, Y, 0, "two-sided")
        assert out["t"] == pytest.approx(-1.0)
        assert out["p"] == pytest.approx(0.3465935, rel=1e-5)

    def test_matched_pairs(self):
        out = host.matched_pairs_t_test(X, [2, 5, 4, 7, 9], 0, "less")
        assert out["t"] == pytest.approx(-4.0)
        assert out["p"] == pytest.approx(0.00806504, rel=1e-5)

    def test_matched_pairs_with_missing_entries(self):
        """Pairs 2 and 3 are incomplete: d = (-1, -1, -4), se = 1, t = -2."""
        out = host.matched_pairs_t_test([1, None, 3, 4, 5], [2, 3, None, 5, 9], 0, "two-sided")
        clean = host.matched_pairs_t_test([1, 4, 5], [2, 5, 9], 0, "two-sided")
        assert out == clean
        assert out["t"] == pytest.approx(-2.0)

    def test_variance(self):
        out = host.variance_test(X, [6, 7, 8, 9, 10], "two-sided")
        assert set(out) == {"f", "p", "n1", "n2", "s1", "s2"}
        assert out["f"] == pytest.approx(1.0)
        assert out["p"] == pytest.approx(1.0)
        assert out["n1"] == 5
        assert out["s2"] == pytest.approx(np.sqrt(2.5))

    def test_anova(self):
        out = host.anova_1way_test([X, Y])
        assert set(out) == {"f", "p"}
        assert out["f"] == pytest.approx(1.0)
        assert out["p"] == pytest.approx(0.3465935, rel=1e-5)

    def test_regression(self):
        out = host.regression_test(X, [2, 30, 4, 50, 6])
        assert out["f"] == pytest.approx(0.139601, rel=1e-5)
        assert out["p"] == pytest.approx(0.7335, abs=1e-4)


class TestErrorPayloads:

    def test_invalid_tails(self):
        out = host.one_samp_t_test(X, "both")
        assert set(out) == {"error"}
        assert out["error"].startswith("Invalid test type")

    def test_zero_sd_y(self):
        out = host.variance_test(X, [3, 3, 3], "two-sided")
        assert "Division by zero" in out["error"]

    def test_empty_sample(self):
        out = host.two_samp_t_test([], Y, 0, "less")
        assert "sample is empty" in out["error"]

    def test_unparseable_delta0(self):
        out = host.two_samp_t_test(X, Y, "abc", "less")
        assert "delta0" in out["error"]

    def test_unequal_groups(self):
        out = host.anova_1way_test([[1, 2, 3], [4, 5]])
        assert "equal group sizes" in out["error"]

    def test_unequal_pairs(self):
        out = host.matched_pairs_t_test(X, [1, 2], 0, "two-sided")
        assert "Inconsistent lengths" in out["error"]

    def test_anova_not_nested(self):
        out = host.anova_1way_test("groups")
        assert "error" in out
