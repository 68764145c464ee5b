"""Tests for the approximate display tornado."""

import pytest

from governos_roi.engine.tornado import TORNADO_LABELS, approximate_tornado


class TestApproximateTornado:
    def test_labels(self):
        rows = approximate_tornado(1_000.0, 1.0)
        assert [r.name for r in rows] == list(TORNADO_LABELS)

    def test_standard_row(self):
        row = approximate_tornado(1_000.0, 1.0)[0]
        assert row.low == pytest.approx(850.0)
        assert row.high == pytest.approx(1_150.0)
        assert row.range == pytest.approx(300.0)

    def test_non_compliance_row_scaled(self):
        row = approximate_tornado(1_000.0, 0.7)[3]
        delta = 1_000.0 * 0.15 * 0.25 * 0.7
        assert row.range == pytest.approx(2 * delta)
        assert row.low == pytest.approx(1_000.0 - delta)

    def test_negative_npv_keeps_low_below_high(self):
        for row in approximate_tornado(-2_000.0, 1.25):
            assert row.low <= row.high
            assert row.range >= 0

    def test_zero_npv(self):
        assert all(r.range == 0 for r in approximate_tornado(0.0, 1.0))
