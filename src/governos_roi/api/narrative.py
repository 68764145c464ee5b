"""Narrative generator: plain-English reading of an ROI result.

Also owns display formatting (currency symbol, half-up rounding, thousands
separators) so every text surface renders money the same way.
"""

from __future__ import annotations

import math

from governos_roi.engine.units import round_half_up
from governos_roi.models.results import DerivedFinancials

CURRENCY_SYMBOLS: dict[str, str] = {"GBP": "£", "USD": "$", "EUR": "€"}
DEFAULT_SYMBOL = "£"


def format_money(value: float, currency: str) -> str:
    """``£1,234`` style.  Unknown currency codes fall back to £; nan/inf → ``n/a``."""
    if not math.isfinite(value):
        return "n/a"
    symbol = CURRENCY_SYMBOLS.get(currency, DEFAULT_SYMBOL)
    return f"{symbol}{round_half_up(value):,.0f}"


def format_pct(value: float, decimals: int = 0) -> str:
    if not math.isfinite(value):
        return "n/a"
    return f"{value * 100:.{decimals}f}%"


def format_payback(result: DerivedFinancials) -> str:
    months = result.summary.payback_months
    if months is not None:
        return f"{months} months"
    return f"not reached within {len(result.cashflows) * 3} months"


def generate_narrative(result: DerivedFinancials) -> str:
    """Generate a plain-text narrative.

    Sections: headline metrics, benefit drivers, baseline context, notes.
    """
    s = result.summary
    ccy = result.currency
    years = len(result.cashflows) // 4

    sections: list[str] = []

    # ── 1. Headline ──
    sections.append("=" * 60)
    sections.append("HEADLINE METRICS")
    sections.append("=" * 60)
    sections.append(
        f"Horizon: {years} years ({len(result.cashflows)} quarters)\n"
        f"Payback: {format_payback(result)}\n"
        f"Year-1 net impact: {format_money(s.year1_net, ccy)}\n"
        f"{years}-year ROI: {format_pct(s.roi_pct)}\n"
        f"{years}-year NPV: {format_money(s.npv, ccy)}\n"
        f"IRR: {format_pct(s.irr_annual_nominal, 1)} annual ({format_pct(s.irr, 1)} per quarter)\n"
        f"{years}-year net: {format_money(s.three_yr_net, ccy)}"
    )

    # ── 2. Benefits ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("BENEFIT BREAKDOWN (annualised)")
    sections.append("=" * 60)
    total = s.annual_benefits
    for bar in sorted(result.benefit_bars, key=lambda b: b.value, reverse=True):
        pct = (bar.value / total * 100) if total > 0 else 0
        sections.append(f"  {bar.name:20s}  {format_money(bar.value, ccy):>14s}  ({pct:5.1f}%)")
    sections.append(
        f"\nTotal annual benefit {format_money(total, ccy)} against "
        f"{format_money(s.annual_costs, ccy)} annual platform cost "
        f"and {format_money(s.one_time_cost, ccy)} one-time implementation."
    )

    # ── 3. Baseline ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("BASELINE CONTEXT (annualised)")
    sections.append("=" * 60)
    for name, value in result.baseline_context.as_dict().items():
        sections.append(f"  {name:20s}  {format_money(value, ccy):>14s}")

    # ── 4. Notes ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("NOTES")
    sections.append("=" * 60)
    notes = [
        "Figures are illustrative. NPV/IRR are computed on quarterly cash flows.",
        "The tornado table is an approximation (±15% of base NPV), not a re-run of the model.",
    ]
    if not s.irr_converged:
        notes.append(
            f"IRR did not converge after {s.irr_iterations} iterations; "
            f"the reported rate is the last estimate."
        )
    for i, note in enumerate(notes, 1):
        sections.append(f"  {i}. {note}")

    return "\n".join(sections)


def generate_scenario_comparison(results: dict[str, DerivedFinancials]) -> str:
    """Side-by-side table of headline metrics, one row per scenario."""
    if not results:
        return "No results to compare."

    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("SCENARIO COMPARISON")
    sections.append("=" * 60)

    header = f"{'Scenario':14s}  {'Annual benefit':>15s}  {'NPV':>14s}  {'ROI':>7s}  {'Payback':>10s}"
    sections.append(header)
    sections.append("-" * len(header))
    for name, r in results.items():
        s = r.summary
        payback = f"{s.payback_months} mo" if s.payback_months is not None else "Never"
        sections.append(
            f"{name:14s}  {format_money(s.annual_benefits, r.currency):>15s}  "
            f"{format_money(s.npv, r.currency):>14s}  {format_pct(s.roi_pct):>7s}  {payback:>10s}"
        )

    return "\n".join(sections)
