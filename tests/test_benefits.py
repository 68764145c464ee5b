"""Tests for benefit-lever aggregation and the scenario multiplier."""

import pytest

from governos_roi.engine.baseline import compute_baseline
from governos_roi.engine.benefits import BENEFIT_LABELS, compute_benefits


@pytest.fixture
def baseline(people, software, risk):
    return compute_baseline(people, software, risk)


class TestComputeBenefits:
    def test_base_terms(self, baseline, levers):
        b = compute_benefits(baseline, levers, 1.0)
        assert b.tickets_changes == pytest.approx(40_136.71875)
        assert b.onboarding == pytest.approx(baseline.onboarding * 0.6)
        assert b.audit_internal == pytest.approx(baseline.audit_internal * 0.5)
        assert b.audit_external == pytest.approx(36_000)
        assert b.incidents == pytest.approx(96_000)
        assert b.consolidation == pytest.approx(240_000)
        assert b.risk_avoided == pytest.approx(15_000)
        assert b.value_acceleration == pytest.approx(300_000)

    def test_total_is_sum_of_terms(self, baseline, levers):
        b = compute_benefits(baseline, levers, 1.0)
        assert b.total == pytest.approx(sum(b.terms()))

    def test_multiplier_scales_every_term_except_tool_rounding(self, baseline, levers):
        base = compute_benefits(baseline, levers, 1.0)
        conservative = compute_benefits(baseline, levers, 0.7)
        assert conservative.tickets_changes == pytest.approx(base.tickets_changes * 0.7)
        assert conservative.risk_avoided == pytest.approx(base.risk_avoided * 0.7)
        assert conservative.value_acceleration == pytest.approx(base.value_acceleration * 0.7)

    def test_tools_retired_rounds_half_up(self, baseline, levers):
        # 2 × 0.7 = 1.4 → 1 tool; 2 × 1.25 = 2.5 → 3 tools
        assert compute_benefits(baseline, levers, 0.7).consolidation == pytest.approx(120_000)
        assert compute_benefits(baseline, levers, 1.25).consolidation == pytest.approx(360_000)

    def test_zero_levers_leave_only_risk(self, baseline, zero_levers):
        b = compute_benefits(baseline, zero_levers, 0.7)
        assert b.total == pytest.approx(b.risk_avoided)
        assert b.risk_avoided == pytest.approx(60_000 * 0.25 * 0.7)


class TestBenefitBars:
    def test_labels_and_order(self, baseline, levers):
        bars = compute_benefits(baseline, levers, 1.0).to_bars()
        assert [bar.name for bar in bars] == list(BENEFIT_LABELS)

    def test_values_rounded(self, baseline, levers):
        bars = compute_benefits(baseline, levers, 1.0).to_bars()
        assert [bar.value for bar in bars] == [
            40_137, 18_346, 8_233, 36_000, 96_000, 240_000, 15_000, 300_000,
        ]
