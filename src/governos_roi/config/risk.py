"""Risk & compliance baseline."""

from pydantic import Field

from governos_roi.config.base import AssumptionModel


class RiskComplianceConfig(AssumptionModel):
    """Audit effort, incident history and regulatory exposure."""

    audit_hours_per_year: float = Field(
        default=800, description="Internal hours spent on audits, costed at the blended rate",
    )
    external_assess_spend: float = Field(default=120_000.0, description="External assessor spend per year")
    non_compliance_prob: float = Field(
        default=0.05, description="Annual probability of a non-compliance finding (0–1)",
    )
    non_compliance_impact: float = Field(
        default=1_200_000.0, description="Cost of a non-compliance finding (fines + remediation)",
    )
    incidents_per_year: float = Field(default=6, description="Data incidents per year")
    incident_cost: float = Field(default=40_000.0, description="Average cost per incident")
    mttr_days: float = Field(default=3, description="Mean time to resolve an incident (days). Informational.")
