"""Tests for dB/ratio gain conversion."""

import math

import numpy as np
import pytest

from sample_gain.config import DB_TO_VOLTAGE, UNITY_GAIN, VOLTAGE_TO_DB, ZERO_DB
from sample_gain.utils.conversion import (
    db_to_ratio,
    db_to_ratio_exact,
    ratio_to_db,
    ratio_to_db_exact,
)


class TestConstants:
    def test_values(self):
        assert DB_TO_VOLTAGE == np.float32(0.05)
        assert VOLTAGE_TO_DB == np.float32(20.0)
        assert UNITY_GAIN == 1.0
        assert ZERO_DB == 0.0

    def test_constants_are_float32(self):
        for constant in (DB_TO_VOLTAGE, VOLTAGE_TO_DB, UNITY_GAIN, ZERO_DB):
            assert isinstance(constant, np.float32)


class TestDbToRatio:
    def test_zero_db_is_unity(self):
        assert float(db_to_ratio(ZERO_DB)) == pytest.approx(UNITY_GAIN, rel=1e-4)

    @pytest.mark.parametrize("db", [-60.0, -20.0, -6.0, -0.3, 3.0, 6.0, 12.0, 20.0])
    def test_matches_exact(self, db):
        assert float(db_to_ratio(db)) == pytest.approx(db_to_ratio_exact(db), rel=1e-4)

    def test_amplification_and_attenuation(self):
        assert db_to_ratio(6.0) > 1.0
        assert 0.0 < db_to_ratio(-6.0) < 1.0
        assert db_to_ratio(-300.0) > 0.0

    def test_monotonic(self):
        db = np.linspace(-100, 100, 201)
        assert np.all(np.diff(db_to_ratio(db)) > 0)

    def test_scalar_returns_float32(self):
        assert isinstance(db_to_ratio(-6.0), np.float32)

    def test_array_returns_float32(self):
        result = db_to_ratio([-6.0, 0.0, 6.0])
        assert result.dtype == np.float32
        assert result.shape == (3,)


class TestRatioToDb:
    def test_unity_is_zero_db(self):
        assert float(ratio_to_db(UNITY_GAIN)) == pytest.approx(0.0, abs=1e-3)

    @pytest.mark.parametrize("ratio", [0.001, 0.1, 0.5, 0.966, 2.0, 10.0, 1000.0])
    def test_matches_exact(self, ratio):
        assert float(ratio_to_db(ratio)) == pytest.approx(ratio_to_db_exact(ratio), abs=5e-3)

    def test_monotonic(self):
        ratios = np.geomspace(0.001, 1000, 121)
        assert np.all(np.diff(ratio_to_db(ratios)) > 0)

    def test_zero_ratio_is_not_checked(self):
        result = ratio_to_db(0.0)
        assert np.isfinite(result)
        assert result < -700

    def test_scalar_returns_float32(self):
        assert isinstance(ratio_to_db(0.5), np.float32)


class TestRoundTrip:
    @pytest.mark.parametrize("db", [-60.0, -6.0, 6.0, 20.0])
    def test_db_round_trip(self, db):
        result = float(ratio_to_db(db_to_ratio(db)))
        assert result == pytest.approx(db, rel=1e-4)

    def test_zero_db_round_trip(self):
        result = float(ratio_to_db(db_to_ratio(ZERO_DB)))
        assert result == pytest.approx(0.0, abs=1e-3)

    def test_array_round_trip(self):
        db = np.linspace(-60, 20, 33)
        np.testing.assert_allclose(ratio_to_db(db_to_ratio(db)), db, atol=1e-2)


class TestExactConversion:
    def test_db_to_ratio_exact(self):
        assert db_to_ratio_exact(0.0) == 1.0
        assert db_to_ratio_exact(20.0) == pytest.approx(10.0)

    def test_db_to_ratio_exact_overflows_to_inf(self):
        assert db_to_ratio_exact(10000.0) == math.inf

    def test_ratio_to_db_exact(self):
        assert ratio_to_db_exact(1.0) == 0.0
        assert ratio_to_db_exact(10.0) == pytest.approx(20.0)

    def test_ratio_to_db_exact_rejects_non_positive(self):
        with pytest.raises(ValueError):
            ratio_to_db_exact(0.0)
        with pytest.raises(ValueError):
            ratio_to_db_exact(-1.0)
