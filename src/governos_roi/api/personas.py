"""Persona views: which slice of the result each executive sees.

Slices are taken by fixed index from ``benefit_bars``:
  CIO   bars[0:4]   tickets, onboarding, audit internal/external
  CISO  bars[2:6]   audit internal/external, incidents, consolidation
        + bars[6] relabelled "Compliance Risk Avoided"
  CFO   quarterly cash + cumulative, NPV, annual nominal IRR
"""

from __future__ import annotations

from governos_roi.models.results import BenefitBar, DerivedFinancials, PersonaView, QuarterRow


def build_persona_views(result: DerivedFinancials) -> dict[str, PersonaView]:
    bars = result.benefit_bars

    cio = PersonaView(
        persona="cio",
        title="CIO – Operations & Velocity",
        metrics=list(bars[0:4]),
    )

    ciso_metrics = list(bars[2:6])
    if len(bars) > 6:
        ciso_metrics.append(BenefitBar(name="Compliance Risk Avoided", value=bars[6].value))
    ciso = PersonaView(
        persona="ciso",
        title="CISO – Risk & Compliance",
        metrics=ciso_metrics,
    )

    cfo = PersonaView(
        persona="cfo",
        title="CFO – GovernOS Costs & Returns",
        metrics=[],
        quarters=[
            QuarterRow(name=point.name, cash=cash, cum=point.value)
            for point, cash in zip(result.cumulative, result.cashflows)
        ],
        npv=result.summary.npv,
        irr=result.summary.irr_annual_nominal,
    )

    return {"cio": cio, "ciso": ciso, "cfo": cfo}
