"""Scalar helpers: annualisation, unit conversion, IEEE-style division.

Every division in the engine goes through ``ieee_divide`` so that a zero
denominator yields ``inf`` / ``nan`` instead of raising.
"""

from __future__ import annotations

import math

import numpy as np

MONTHS_PER_YEAR = 12
QUARTERS_PER_YEAR = 4
MONTHS_PER_QUARTER = 3
WORK_HOURS_PER_YEAR = 2080
WORK_DAYS_PER_YEAR = 260


def ieee_divide(numerator: float, denominator: float) -> float:
    """``numerator / denominator`` with float semantics: x/0 → ±inf, 0/0 → nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def minutes_to_hours(minutes: float) -> float:
    return minutes / 60


def monthly_to_annual(per_month: float) -> float:
    return per_month * MONTHS_PER_YEAR


def annual_people_cost(ftes: float, cost_per_fte: float) -> float:
    return ftes * cost_per_fte


def quarterize(annual: float) -> float:
    return annual / QUARTERS_PER_YEAR


def round_half_up(value: float) -> float:
    """Round to the nearest whole unit, halves toward +inf (2.5 → 3, -2.5 → -2).

    Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))
