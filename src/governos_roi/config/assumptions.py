"""Top-level input bundle: everything the ROI engine reads."""

from pydantic import Field

from governos_roi.config.base import AssumptionModel
from governos_roi.config.profile import ProfileConfig
from governos_roi.config.people import PeopleProcessConfig
from governos_roi.config.software import SoftwareInfraConfig
from governos_roi.config.risk import RiskComplianceConfig
from governos_roi.config.levers import ValueLeversConfig
from governos_roi.config.pricing import PricingConfig
from governos_roi.config.finance import FinanceConfig


class InputAssumptions(AssumptionModel):
    """Complete, immutable input snapshot for one ROI computation.

    Callers own one value and replace it wholesale on every edit
    (``model_copy(update=...)``); the engine never sees a partial update.
    """

    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    people_process: PeopleProcessConfig = Field(default_factory=PeopleProcessConfig)
    software_infra: SoftwareInfraConfig = Field(default_factory=SoftwareInfraConfig)
    risk_compliance: RiskComplianceConfig = Field(default_factory=RiskComplianceConfig)
    value_levers: ValueLeversConfig = Field(default_factory=ValueLeversConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig, alias="governOS")
    finance: FinanceConfig = Field(default_factory=FinanceConfig)
