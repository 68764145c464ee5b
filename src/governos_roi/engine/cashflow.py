"""Quarterly cash-flow series: flat benefits and costs, one-time fee in Q1.

Key relations (per quarter q in [0, horizon_years × 4)):
  cashflow[q]   = benefit/4 − cost/4 − (one_time if q == 0 else 0)
  cumulative[q] = −one_time + (q + 1) × (benefit/4 − cost/4)
There is no ramp-up curve and no seasonality.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from governos_roi.engine.units import MONTHS_PER_QUARTER, QUARTERS_PER_YEAR, quarterize, round_half_up
from governos_roi.models.results import CumulativePoint


@dataclass
class QuarterlyCashflows:
    """Raw quarterly series plus the first quarter where cumulative turns ≥ 0."""

    cashflows: list[float] = field(default_factory=list)
    cumulative: list[float] = field(default_factory=list)
    """Unrounded running position."""
    payback_quarter: int | None = None

    @property
    def payback_months(self) -> int | None:
        if self.payback_quarter is None:
            return None
        return self.payback_quarter * MONTHS_PER_QUARTER

    def cumulative_points(self) -> list[CumulativePoint]:
        return [
            CumulativePoint(name=f"Q{i}", value=round_half_up(v))
            for i, v in enumerate(self.cumulative, start=1)
        ]


def build_quarterly_cashflows(
    annual_benefits: float,
    annual_costs: float,
    one_time_cost: float,
    horizon_years: int,
) -> QuarterlyCashflows:
    """Build the per-quarter net series and the running cumulative position."""
    quarters = horizon_years * QUARTERS_PER_YEAR
    per_q_benefit = quarterize(annual_benefits)
    per_q_cost = quarterize(annual_costs)
    per_q_net = per_q_benefit - per_q_cost

    result = QuarterlyCashflows()
    cum = -one_time_cost
    for q in range(quarters):
        result.cashflows.append(per_q_benefit - per_q_cost - (one_time_cost if q == 0 else 0))

        # one-time cost is already in the opening position
        cum += per_q_net
        result.cumulative.append(cum)
        if result.payback_quarter is None and cum >= 0:
            result.payback_quarter = q + 1

    return result


def year_one_net(cashflows: list[float]) -> float:
    """Sum of the first four quarters (fewer if the horizon is shorter)."""
    return sum(cashflows[:QUARTERS_PER_YEAR])
