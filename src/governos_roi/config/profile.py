"""Organisation profile: sizing descriptors."""

from pydantic import Field

from governos_roi.config.base import AssumptionModel


class ProfileConfig(AssumptionModel):
    """Who the organisation is.

    Informational only: ``currency`` is the sole field that reaches the
    output, and only as a display label (no conversion is performed).
    """

    currency: str = Field(default="GBP", description="Display currency code (GBP, USD, EUR)")
    employee_count: int = Field(default=500, description="Employees in the organisation")
    governed_domains: int = Field(default=10, description="Data domains under governance")
    tools_in_stack: int = Field(default=6, description="Governance / privacy tools currently licensed")
