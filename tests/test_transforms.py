"""Tests for zedstat.stats.common.transforms."""

import math

import numpy as np
import pytest

from zedstat.stats.common.transforms import (
    chi_to_z,
    r_to_z,
    standardize,
    z_to_chi,
    z_to_r,
)


class TestChiSquare:

    @pytest.mark.parametrize("z", [-2.5, 0.0, 1.3])
    def test_z_to_chi_squares(self, z):
        assert z_to_chi(z) == pytest.approx(z * z)

    def test_chi_to_z_without_df(self):
        assert chi_to_z(6.25) == 2.5

    def test_chi_to_z_with_df(self):
        # sqrt(2 * 18) - sqrt(2 * 5 - 1) = 6 - 3
        assert chi_to_z(18, df=5) == pytest.approx(3.0)

    def test_small_chi_for_df_is_negative(self):
        assert chi_to_z(1.0, df=10) < 0

    def test_negative_chi_rejected(self):
        with pytest.raises(ValueError, match="chi"):
            chi_to_z(-1.0)

    def test_bad_df_rejected(self):
        with pytest.raises(ValueError, match="df"):
            chi_to_z(4.0, df=0)


class TestFisher:

    @pytest.mark.parametrize("r", [-0.95, -0.3, 0.0, 0.42, 0.999])
    def test_round_trip(self, r):
        assert z_to_r(r_to_z(r)) == pytest.approx(r, abs=1e-12)

    def test_known_value(self):
        assert r_to_z(0.5) == pytest.approx(0.5493061443)

    def test_matches_closed_form(self):
        z = 0.7
        assert z_to_r(z) == pytest.approx((math.exp(2 * z) - 1) / (math.exp(2 * z) + 1))

    def test_limits(self):
        assert r_to_z(1) == math.inf
        assert r_to_z(-1) == -math.inf

    @pytest.mark.parametrize("r", [None, 1.01, -2, "0.3"])
    def test_invalid_r_rejected(self, r):
        with pytest.raises(ValueError):
            r_to_z(r)

    def test_missing_z_gives_none(self):
        assert z_to_r(None) is None

    def test_large_z_does_not_overflow(self):
        assert z_to_r(800.0) == 1.0


class TestStandardize:

    def test_identical_values_give_zeros(self):
        out = standardize([4.2] * 5)
        assert out.tolist() == [0.0] * 5

    def test_mean_zero_unit_sd(self):
        out = standardize([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        assert out.mean() == pytest.approx(0.0, abs=1e-12)
        assert np.std(out, ddof=1) == pytest.approx(1.0)

    def test_same_length(self):
        assert len(standardize(range(7))) == 7

    def test_single_value(self):
        assert standardize([3.0]).tolist() == [0.0]

    def test_empty(self):
        assert standardize([]).tolist() == []

    def test_accepts_generators(self):
        out = standardize(x for x in (1, 2, 3))
        assert out.tolist() == [-1.0, 0.0, 1.0]
