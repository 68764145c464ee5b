"""Tests for baseline cost aggregation."""

import math

import pytest

from governos_roi.engine.baseline import (
    compute_baseline,
    compute_blended_hourly_rate,
    compute_daily_role_cost,
)


class TestBlendedRate:
    def test_default_rate(self, people):
        """1.37M payroll over 16 FTEs, 2080 h, halved."""
        expected = 1_370_000 / 16 / 2080 / 2
        assert compute_blended_hourly_rate(people) == pytest.approx(expected)

    def test_weighted_by_fte_count(self, people):
        only_engineers = people.model_copy(update={"analyst_ftes": 0.0, "operator_ftes": 0.0})
        assert compute_blended_hourly_rate(only_engineers) == pytest.approx(110_000 / 2080 / 2)

    def test_zero_ftes_is_nan(self, people):
        no_staff = people.model_copy(update={
            "analyst_ftes": 0.0, "engineer_ftes": 0.0, "operator_ftes": 0.0,
        })
        assert math.isnan(compute_blended_hourly_rate(no_staff))

    def test_daily_cost_is_unweighted(self, people):
        assert compute_daily_role_cost(people) == pytest.approx(265_000 / 3 / 260)


class TestComputeBaseline:
    def test_people_includes_contractors(self, people, software, risk):
        with_contractors = people.model_copy(update={"contractor_spend_per_month": 10_000.0})
        b = compute_baseline(with_contractors, software, risk)
        assert b.people == pytest.approx(1_370_000 + 120_000)

    def test_default_categories(self, people, software, risk):
        b = compute_baseline(people, software, risk)
        assert b.people == pytest.approx(1_370_000)
        # (350×12×0.5 + 60×12×2.5) hours at the blended rate
        assert b.tickets_changes == pytest.approx(80_273.4375)
        assert b.onboarding == pytest.approx(90 * 265_000 / 780)
        assert b.software == pytest.approx(785_000)
        assert b.audit_internal == pytest.approx(800 * 1_370_000 / 16 / 4160)
        assert b.audit_external == 120_000
        assert b.expected_loss == pytest.approx(60_000)
        assert b.incidents == pytest.approx(240_000)

    def test_context_merges_audit(self, people, software, risk):
        b = compute_baseline(people, software, risk)
        ctx = b.to_context()
        assert ctx.compliance_audit == pytest.approx(b.audit_internal + b.audit_external)
        assert list(ctx.as_dict()) == [
            "people", "tickets_changes", "onboarding", "software",
            "compliance_audit", "expected_loss", "incidents",
        ]

    def test_negative_inputs_propagate(self, people, software, risk):
        b = compute_baseline(people, software.model_copy(update={"cloud_ops_share": -85_000.0}), risk)
        assert b.software == pytest.approx(700_000)
