"""People & process baseline."""

from pydantic import Field

from governos_roi.config.base import AssumptionModel


class PeopleProcessConfig(AssumptionModel):
    """Staffing by role plus the ticket / change workload they absorb."""

    # --- Roles ---
    analyst_ftes: float = Field(default=6, alias="analystFTEs", description="Data governance analysts (FTE)")
    analyst_cost: float = Field(default=85_000.0, description="Fully-loaded annual cost per analyst")
    engineer_ftes: float = Field(default=4, alias="engineerFTEs", description="Data / platform engineers (FTE)")
    engineer_cost: float = Field(default=110_000.0, description="Fully-loaded annual cost per engineer")
    operator_ftes: float = Field(default=6, alias="operatorFTEs", description="Privacy / security operators (FTE)")
    operator_cost: float = Field(default=70_000.0, description="Fully-loaded annual cost per operator")

    # --- Workload ---
    tickets_per_month: float = Field(default=350, description="Access / data requests raised per month")
    minutes_per_ticket: float = Field(default=30, description="Handling time per ticket (minutes)")
    change_req_per_month: float = Field(default=60, description="Policy / schema change requests per month")
    hours_per_change: float = Field(default=2.5, description="Handling time per change request (hours)")
    onboarding_days: float = Field(
        default=90,
        description="Days to onboard a new data source or team. "
                    "Costed at the average daily cost of the three roles.",
    )
    contractor_spend_per_month: float = Field(default=0.0, description="Contractor spend per month")
