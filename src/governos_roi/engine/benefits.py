"""Benefit-lever aggregation: annual savings and gains from adoption.

Every lever is multiplied by the scenario factor ``m`` (0.7 / 1.0 / 1.25):

  tickets/changes   = tickets_changes × deflection × m
  onboarding        = onboarding × reduction × m
  audit (internal)  = audit_internal × audit_hours_reduction × m
  audit (external)  = audit_external × external_assess_reduction × m
  incidents         = incidents × mttr_reduction × m
  consolidation     = round(tools_retired × m) × cost per tool
  risk avoided      = expected_loss × 0.25 × m
  value acceleration = value_pool × projects × uplift × m
"""

from __future__ import annotations

from dataclasses import dataclass

from governos_roi.config.levers import ValueLeversConfig
from governos_roi.engine.baseline import BaselineCosts
from governos_roi.engine.units import round_half_up
from governos_roi.models.results import BenefitBar

RISK_REDUCTION_SHARE = 0.25

BENEFIT_LABELS: tuple[str, ...] = (
    "Tickets/Changes",
    "Onboarding",
    "Audit (Internal)",
    "Audit (External)",
    "Incidents",
    "Consolidation",
    "Risk Avoided",
    "Value Acceleration",
)


@dataclass(frozen=True)
class BenefitLevers:
    """The eight annual benefit terms, unrounded, in display order."""

    tickets_changes: float
    onboarding: float
    audit_internal: float
    audit_external: float
    incidents: float
    consolidation: float
    risk_avoided: float
    value_acceleration: float

    def terms(self) -> tuple[float, ...]:
        return (
            self.tickets_changes,
            self.onboarding,
            self.audit_internal,
            self.audit_external,
            self.incidents,
            self.consolidation,
            self.risk_avoided,
            self.value_acceleration,
        )

    @property
    def total(self) -> float:
        return sum(self.terms())

    def to_bars(self) -> list[BenefitBar]:
        return [
            BenefitBar(name=label, value=round_half_up(value))
            for label, value in zip(BENEFIT_LABELS, self.terms())
        ]


def compute_benefits(
    baseline: BaselineCosts,
    levers: ValueLeversConfig,
    multiplier: float,
) -> BenefitLevers:
    """Apply the scenario-scaled levers to the baseline."""
    tools_retired = round_half_up(levers.tools_retired_count * multiplier)
    value_pool = levers.value_pool_per_project * levers.projects_per_year

    return BenefitLevers(
        tickets_changes=baseline.tickets_changes * (levers.ticket_deflection * multiplier),
        onboarding=baseline.onboarding * (levers.onboarding_reduction * multiplier),
        audit_internal=baseline.audit_internal * (levers.audit_hours_reduction * multiplier),
        audit_external=baseline.audit_external * (levers.external_assess_reduction * multiplier),
        incidents=baseline.incidents * (levers.mttr_reduction * multiplier),
        consolidation=tools_retired * levers.tools_retired_annual_cost,
        risk_avoided=baseline.expected_loss * (RISK_REDUCTION_SHARE * multiplier),
        value_acceleration=value_pool * levers.realized_value_uplift * multiplier,
    )
