"""Finance controls: horizon, discount rate, scenario."""

from typing import Literal

from pydantic import Field

from governos_roi.config.base import AssumptionModel

ScenarioCase = Literal["Conservative", "Base", "Optimistic"]

SCENARIO_MULTIPLIERS: dict[str, float] = {
    "Conservative": 0.7,
    "Base": 1.0,
    "Optimistic": 1.25,
}
"""Benefit realisation factor per scenario.  Baseline costs are never scaled."""


class FinanceConfig(AssumptionModel):
    """Projection horizon and time-value-of-money settings.

    Cash flows are quarterly: ``horizon_years × 4`` periods, discounted at
    ``discount_rate / 4`` per quarter (simple division, not a compounded root).
    """

    horizon_years: int = Field(default=3, description="Projection horizon (years)")
    discount_rate: float = Field(default=0.10, description="Annual discount rate (e.g. 0.10 for 10%)")
    scenario: ScenarioCase = Field(
        default="Base",
        description="Benefit realisation case: 'Conservative' (×0.7), "
                    "'Base' (×1.0) or 'Optimistic' (×1.25).",
    )

    @property
    def scenario_multiplier(self) -> float:
        return SCENARIO_MULTIPLIERS[self.scenario]
