"""GovernOS value levers: the platform's claimed impact.

Fractions are expected in 0–1; every lever is multiplied by the scenario
factor before it is applied (see ``engine.benefits``).
"""

from pydantic import Field

from governos_roi.config.base import AssumptionModel


class ValueLeversConfig(AssumptionModel):
    """Reduction / uplift factors and consolidation counts."""

    ticket_deflection: float = Field(default=0.5, description="Share of ticket + change effort removed")
    onboarding_reduction: float = Field(default=0.6, description="Share of onboarding time removed")
    coverage_uplift: float = Field(default=0.35, description="Governance coverage uplift. Informational.")
    audit_hours_reduction: float = Field(default=0.5, description="Share of internal audit hours removed")
    external_assess_reduction: float = Field(default=0.3, description="Share of external assessor spend removed")
    mttr_reduction: float = Field(default=0.4, description="Share of incident cost removed via faster resolution")

    # --- Consolidation ---
    tools_retired_count: float = Field(
        default=2,
        description="Tools retired after adoption. Scaled by the scenario factor, "
                    "then rounded to a whole number of tools.",
    )
    tools_retired_annual_cost: float = Field(default=120_000.0, description="Average annual cost per retired tool")

    # --- Value acceleration ---
    realized_value_uplift: float = Field(default=0.2, description="Uplift in realised value per data project")
    value_pool_per_project: float = Field(default=250_000.0, description="Value pool of one data project")
    projects_per_year: float = Field(default=6, description="Data projects delivered per year")
