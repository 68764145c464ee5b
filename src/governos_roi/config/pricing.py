"""GovernOS pricing: what adoption costs."""

from pydantic import Field

from governos_roi.config.base import AssumptionModel


class PricingConfig(AssumptionModel):
    """Platform license, add-ons and implementation fee."""

    base_license_annual: float = Field(default=500_000.0, description="Annual base license")
    implementation_one_time: float = Field(
        default=120_000.0,
        description="One-time implementation fee, charged in the first quarter only",
    )
    add_on_annual: float = Field(default=0.0, description="Annual add-on modules")

    @property
    def annual_cost(self) -> float:
        return self.base_license_annual + self.add_on_annual
