"""Configuration models: every input the ROI engine reads."""

from governos_roi.config.profile import ProfileConfig
from governos_roi.config.people import PeopleProcessConfig
from governos_roi.config.software import SoftwareInfraConfig
from governos_roi.config.risk import RiskComplianceConfig
from governos_roi.config.levers import ValueLeversConfig
from governos_roi.config.pricing import PricingConfig
from governos_roi.config.finance import SCENARIO_MULTIPLIERS, FinanceConfig, ScenarioCase
from governos_roi.config.assumptions import InputAssumptions

__all__ = [
    "ProfileConfig",
    "PeopleProcessConfig",
    "SoftwareInfraConfig",
    "RiskComplianceConfig",
    "ValueLeversConfig",
    "PricingConfig",
    "FinanceConfig",
    "ScenarioCase",
    "SCENARIO_MULTIPLIERS",
    "InputAssumptions",
]
