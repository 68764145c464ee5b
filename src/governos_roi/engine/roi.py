"""ROI projection engine: ``InputAssumptions → DerivedFinancials``.

Pipeline (fixed order, no state kept between calls):
  1. scenario factor        Conservative 0.7 / Base 1.0 / Optimistic 1.25
  2. baseline costs         engine.baseline
  3. benefit levers         engine.benefits (scaled by the factor)
  4. quarterly cash flows   engine.cashflow
  5. summary metrics        payback, year-1 net, horizon net, ROI %, NPV, IRR
  6. display aggregates     benefit bars, approximate tornado

Degenerate inputs (zero FTEs, zero spend) produce nan/inf, never an
exception.  Non-numeric inputs are rejected earlier, by pydantic.
"""

from __future__ import annotations

from governos_roi.config.assumptions import InputAssumptions
from governos_roi.config.finance import SCENARIO_MULTIPLIERS
from governos_roi.engine.baseline import compute_baseline
from governos_roi.engine.benefits import compute_benefits
from governos_roi.engine.cashflow import build_quarterly_cashflows, year_one_net
from governos_roi.engine.tornado import approximate_tornado
from governos_roi.finance.dcf import compute_irr, compute_npv, compute_roi_pct
from governos_roi.models.results import DerivedFinancials, RoiSummary


def compute_roi(inputs: InputAssumptions) -> DerivedFinancials:
    """Run the full projection for one complete input snapshot."""
    fin = inputs.finance
    pricing = inputs.pricing
    multiplier = fin.scenario_multiplier

    baseline = compute_baseline(inputs.people_process, inputs.software_infra, inputs.risk_compliance)
    benefits = compute_benefits(baseline, inputs.value_levers, multiplier)

    annual_benefits = benefits.total
    annual_costs = pricing.annual_cost
    one_time = pricing.implementation_one_time

    flows = build_quarterly_cashflows(annual_benefits, annual_costs, one_time, fin.horizon_years)
    cashflows = flows.cashflows

    npv = compute_npv(cashflows, fin.discount_rate)
    irr = compute_irr(cashflows)
    three_yr_net = sum(cashflows)

    summary = RoiSummary(
        payback_quarter=flows.payback_quarter,
        payback_months=flows.payback_months,
        year1_net=year_one_net(cashflows),
        three_yr_net=three_yr_net,
        roi_pct=compute_roi_pct(three_yr_net, annual_costs, fin.horizon_years, one_time),
        npv=npv,
        irr=irr.rate,
        irr_annual_nominal=irr.rate * 4,
        irr_converged=irr.converged,
        irr_iterations=irr.iterations,
        annual_benefits=annual_benefits,
        annual_costs=annual_costs,
        one_time_cost=one_time,
    )

    return DerivedFinancials(
        currency=inputs.profile.currency,
        baseline_context=baseline.to_context(),
        benefit_bars=benefits.to_bars(),
        cashflows=list(cashflows),
        cumulative=flows.cumulative_points(),
        summary=summary,
        tornado=approximate_tornado(npv, multiplier),
    )


def compare_scenarios(inputs: InputAssumptions) -> dict[str, DerivedFinancials]:
    """Run the same inputs under every scenario case, Conservative first."""
    results: dict[str, DerivedFinancials] = {}
    for case in SCENARIO_MULTIPLIERS:
        variant = inputs.model_copy(update={
            "finance": inputs.finance.model_copy(update={"scenario": case}),
        })
        results[case] = compute_roi(variant)
    return results
