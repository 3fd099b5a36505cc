"""
Tests for the Normal, Student's t and Fisher-Snedecor reference
distributions.

Reference values from R qnorm / qt / qf / pt / pf.
"""

import numpy as np
import pytest

from pyinference.core.exceptions import ValidationError
from pyinference.distributions import FisherSnedecor, Normal, StudentT


class TestNormal:

    def test_quantile(self):
        """qnorm(0.975) = 1.959964."""
        assert Normal().inverse_cdf(0.975) == pytest.approx(1.959963984540054, rel=1e-10)

    def test_cdf_symmetric(self):
        assert Normal().cdf(0.0) == pytest.approx(0.5)
        assert Normal().cdf(-1.5) == pytest.approx(Normal().sf(1.5))

    def test_sf_far_tail(self):
        """1 - cdf(10) underflows to 0; sf does not."""
        assert Normal().sf(10.0) > 0.0

    @pytest.mark.parametrize("p", [0.001, 0.025, 0.5, 0.9, 0.999])
    def test_inverse_round_trip(self, p):
        d = Normal()
        assert d.cdf(d.inverse_cdf(p)) == pytest.approx(p, rel=1e-9)


class TestStudentT:

    def test_quantile(self):
        """qt(0.975, 4) = 2.776445."""
        assert StudentT(4).inverse_cdf(0.975) == pytest.approx(2.7764451051977987, rel=1e-10)

    def test_cdf(self):
        """pt(4.242641, 4) = 0.9933822."""
        assert StudentT(4).cdf(4.242640687119285) == pytest.approx(
            0.99338220021815871, rel=1e-10,
        )

    def test_fractional_df(self):
        d = StudentT(8.5)
        assert d.df == 8.5
        assert d.cdf(d.inverse_cdf(0.9)) == pytest.approx(0.9, rel=1e-9)

    @pytest.mark.parametrize("df", [1.0, 3.7, 12.25])
    @pytest.mark.parametrize("p", [0.001, 0.025, 0.5, 0.9, 0.999])
    def test_inverse_round_trip(self, df, p):
        d = StudentT(df)
        assert d.cdf(d.inverse_cdf(p)) == pytest.approx(p, rel=1e-8)

    def test_sf_plus_cdf(self):
        d = StudentT(3)
        assert d.cdf(1.2) + d.sf(1.2) == pytest.approx(1.0)

    @pytest.mark.parametrize("df", [0, -1, float("nan")])
    def test_invalid_df(self, df):
        with pytest.raises(ValidationError, match="df"):
            StudentT(df)


class TestFisherSnedecor:

    def test_quantiles(self):
        """qf(0.025, 4, 4) = 0.1041175, qf(0.975, 4, 4) = 9.604530."""
        d = FisherSnedecor(4, 4)
        assert d.inverse_cdf(0.025) == pytest.approx(0.10411753745392764, rel=1e-6)
        assert d.inverse_cdf(0.975) == pytest.approx(9.604529883, rel=1e-6)

    def test_sf_matches_t_squared(self):
        """F(1, df) is the square of t(df): pf(1, 1, 8, lower=FALSE) = 2 * pt(-1, 8)."""
        assert FisherSnedecor(1, 8).sf(1.0) == pytest.approx(
            2.0 * StudentT(8).cdf(-1.0), rel=1e-10,
        )

    @pytest.mark.parametrize("df1, df2", [(1.0, 8.0), (2.5, 7.0), (4.0, 4.0)])
    @pytest.mark.parametrize("p", [0.001, 0.025, 0.5, 0.9, 0.999])
    def test_inverse_round_trip(self, df1, df2, p):
        d = FisherSnedecor(df1, df2)
        assert d.cdf(d.inverse_cdf(p)) == pytest.approx(p, rel=1e-8)

    def test_cdf_at_zero(self):
        assert FisherSnedecor(3, 5).cdf(0.0) == 0.0

    def test_invalid_df(self):
        with pytest.raises(ValidationError, match="df1"):
            FisherSnedecor(0, 4)
        with pytest.raises(ValidationError, match="df2"):
            FisherSnedecor(4, -2)


class TestInvalidProbability:

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.5, 2.0, np.nan])
    def test_rejected(self, p):
        with pytest.raises(ValidationError, match="probability"):
            Normal().inverse_cdf(p)
