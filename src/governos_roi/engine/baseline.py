"""Baseline (current-state) cost aggregation.

All figures are annual.  Two labour rates are used:

  blended hourly rate = Σ(FTE × cost) / ΣFTE / 2080 / 2
      ticket, change and audit effort.  The final halving is part of the
      model ("blended and discounted") and must stay.
  average daily cost  = (analyst + engineer + operator cost) / 3 / 260
      onboarding days.
"""

from __future__ import annotations

from dataclasses import dataclass

from governos_roi.config.people import PeopleProcessConfig
from governos_roi.config.risk import RiskComplianceConfig
from governos_roi.config.software import SoftwareInfraConfig
from governos_roi.engine.units import (
    WORK_DAYS_PER_YEAR,
    WORK_HOURS_PER_YEAR,
    annual_people_cost,
    ieee_divide,
    minutes_to_hours,
    monthly_to_annual,
)
from governos_roi.models.results import BaselineContext

BLENDED_RATE_DISCOUNT = 0.5


@dataclass(frozen=True)
class BaselineCosts:
    """Intermediate baseline figures, including the audit split the levers need."""

    people: float
    tickets_changes: float
    onboarding: float
    software: float
    audit_internal: float
    audit_external: float
    expected_loss: float
    incidents: float
    blended_hourly_rate: float
    daily_role_cost: float

    def to_context(self) -> BaselineContext:
        return BaselineContext(
            people=self.people,
            tickets_changes=self.tickets_changes,
            onboarding=self.onboarding,
            software=self.software,
            compliance_audit=self.audit_internal + self.audit_external,
            expected_loss=self.expected_loss,
            incidents=self.incidents,
        )


def compute_blended_hourly_rate(pp: PeopleProcessConfig) -> float:
    """Σ(FTE × cost) / ΣFTE / 2080, halved.  Zero total FTEs → nan/inf."""
    role_annual = (
        annual_people_cost(pp.analyst_ftes, pp.analyst_cost)
        + annual_people_cost(pp.engineer_ftes, pp.engineer_cost)
        + annual_people_cost(pp.operator_ftes, pp.operator_cost)
    )
    total_ftes = pp.analyst_ftes + pp.engineer_ftes + pp.operator_ftes
    per_fte = ieee_divide(role_annual, total_ftes)
    return per_fte / WORK_HOURS_PER_YEAR * BLENDED_RATE_DISCOUNT


def compute_daily_role_cost(pp: PeopleProcessConfig) -> float:
    """Unweighted mean of the three per-FTE costs, per working day."""
    return (pp.analyst_cost + pp.engineer_cost + pp.operator_cost) / 3 / WORK_DAYS_PER_YEAR


def compute_baseline(
    pp: PeopleProcessConfig,
    sw: SoftwareInfraConfig,
    rc: RiskComplianceConfig,
) -> BaselineCosts:
    """Aggregate the seven current-state cost categories."""
    people = (
        annual_people_cost(pp.analyst_ftes, pp.analyst_cost)
        + annual_people_cost(pp.engineer_ftes, pp.engineer_cost)
        + annual_people_cost(pp.operator_ftes, pp.operator_cost)
        + monthly_to_annual(pp.contractor_spend_per_month)
    )

    rate = compute_blended_hourly_rate(pp)

    ticket_hours = monthly_to_annual(pp.tickets_per_month) * minutes_to_hours(pp.minutes_per_ticket)
    change_hours = monthly_to_annual(pp.change_req_per_month) * pp.hours_per_change
    tickets_changes = (ticket_hours + change_hours) * rate

    daily = compute_daily_role_cost(pp)
    onboarding = pp.onboarding_days * daily

    return BaselineCosts(
        people=people,
        tickets_changes=tickets_changes,
        onboarding=onboarding,
        software=sw.total(),
        audit_internal=rc.audit_hours_per_year * rate,
        audit_external=rc.external_assess_spend,
        expected_loss=rc.non_compliance_prob * rc.non_compliance_impact,
        incidents=rc.incidents_per_year * rc.incident_cost,
        blended_hourly_rate=rate,
        daily_role_cost=daily,
    )
