"""Tests for scalar helpers: division, rounding, annualisation."""

import math

import pytest

from governos_roi.engine.units import (
    annual_people_cost,
    ieee_divide,
    minutes_to_hours,
    monthly_to_annual,
    quarterize,
    round_half_up,
)


class TestIeeeDivide:
    def test_regular(self):
        assert ieee_divide(10.0, 4.0) == pytest.approx(2.5)

    def test_positive_over_zero_is_inf(self):
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_negative_over_zero_is_minus_inf(self):
        assert ieee_divide(-1.0, 0.0) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(ieee_divide(0.0, 0.0))


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [
        (2.5, 3.0),
        (3.5, 4.0),
        (-2.5, -2.0),
        (-2.6, -3.0),
        (0.49, 0.0),
        (1234.5, 1235.0),
    ])
    def test_halves_round_toward_plus_infinity(self, value, expected):
        assert round_half_up(value) == expected

    def test_non_finite_passes_through(self):
        assert math.isnan(round_half_up(math.nan))
        assert round_half_up(math.inf) == math.inf


class TestConversions:
    def test_minutes_to_hours(self):
        assert minutes_to_hours(30) == pytest.approx(0.5)

    def test_monthly_to_annual(self):
        assert monthly_to_annual(350) == 4200

    def test_annual_people_cost(self):
        assert annual_people_cost(6, 85_000) == 510_000

    def test_quarterize(self):
        assert quarterize(500_000) == 125_000
