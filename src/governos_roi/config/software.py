"""Software & infrastructure: annualised run costs."""

from pydantic import Field

from governos_roi.config.base import AssumptionModel


class SoftwareInfraConfig(AssumptionModel):
    """Six annual cost categories, summed as-is into the baseline."""

    privacy_discovery: float = Field(default=250_000.0, description="Privacy / data discovery tooling")
    catalog_glossary: float = Field(default=180_000.0, description="Data catalog & business glossary")
    grc_workflow: float = Field(default=120_000.0, description="GRC workflow platform")
    data_quality_mdm: float = Field(default=100_000.0, description="Data quality / MDM")
    siem_allocation: float = Field(default=60_000.0, description="Share of SIEM spend attributed to data governance")
    cloud_ops_share: float = Field(default=75_000.0, description="Share of cloud operations spend")

    def total(self) -> float:
        return (
            self.privacy_discovery
            + self.catalog_glossary
            + self.grc_workflow
            + self.data_quality_mdm
            + self.siem_allocation
            + self.cloud_ops_share
        )
