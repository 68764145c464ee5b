"""Tests for time-value formulas: NPV, IRR, ROI %."""

import math

import pytest

from governos_roi.finance.dcf import compute_irr, compute_npv, compute_roi_pct


# ── NPV tests ──────────────────────────────────────────────────────────────

class TestComputeNPV:
    def test_zero_rate(self):
        """At 0% discount, NPV = sum of cash flows."""
        cfs = [100.0, 200.0, 300.0]
        assert compute_npv(cfs, 0.0) == pytest.approx(600.0, abs=0.01)

    def test_positive_rate_reduces_npv(self):
        cfs = [100.0, 100.0, 100.0]
        npv = compute_npv(cfs, 0.12)
        assert npv < 300.0
        assert npv > 0

    def test_empty_flows(self):
        assert compute_npv([], 0.12) == 0.0

    def test_first_flow_discounted_once(self):
        """10% annual → 2.5% per quarter by simple division."""
        assert compute_npv([1000.0], 0.10) == pytest.approx(1000 / 1.025)

    def test_explicit_sum(self):
        cfs = [-500.0, 200.0, 200.0, 200.0]
        expected = sum(cf / 1.02 ** i for i, cf in enumerate(cfs, start=1))
        assert compute_npv(cfs, 0.08) == pytest.approx(expected)

    def test_monthly_periods(self):
        assert compute_npv([120.0], 0.12, periods_per_year=12) == pytest.approx(120 / 1.01)


# ── IRR tests ──────────────────────────────────────────────────────────────

class TestComputeIRR:
    def test_simple_two_period(self):
        """−100 then +110 → 10% per period."""
        result = compute_irr([-100.0, 110.0])
        assert result.rate == pytest.approx(0.10, abs=1e-6)
        assert result.converged

    def test_npv_is_zero_at_irr(self):
        cfs = [-1000.0, 300.0, 300.0, 300.0, 300.0]
        result = compute_irr(cfs)
        assert result.converged
        # compute_npv takes an annual rate and divides by 4
        assert compute_npv(cfs, result.rate * 4) == pytest.approx(0.0, abs=1e-4)

    def test_irr_is_periodic_not_annual(self):
        cfs = [-1000.0] + [150.0] * 11
        result = compute_irr(cfs)
        assert 0 < result.rate < 0.2

    def test_empty_is_nan(self):
        result = compute_irr([])
        assert math.isnan(result.rate)
        assert not result.converged
        assert result.iterations == 0

    def test_all_positive_does_not_converge(self):
        result = compute_irr([100.0, 100.0, 100.0], max_iter=20)
        assert not result.converged
        assert result.iterations == 20

    def test_non_finite_flows_do_not_raise(self):
        result = compute_irr([math.nan, 1.0])
        assert not result.converged


# ── ROI % tests ────────────────────────────────────────────────────────────

class TestComputeRoiPct:
    def test_basic(self):
        assert compute_roi_pct(500.0, 100.0, 3, 200.0) == pytest.approx(1.0)

    def test_zero_spend_positive_net_is_inf(self):
        assert compute_roi_pct(100.0, 0.0, 3, 0.0) == math.inf

    def test_zero_spend_zero_net_is_nan(self):
        assert math.isnan(compute_roi_pct(0.0, 0.0, 3, 0.0))
