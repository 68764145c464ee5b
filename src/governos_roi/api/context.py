"""Context manifest: makes the calculator self-describing for API clients.

Two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds the model formulas and an interpretation guide
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from governos_roi.config import (
    FinanceConfig,
    InputAssumptions,
    PeopleProcessConfig,
    PricingConfig,
    ProfileConfig,
    RiskComplianceConfig,
    SoftwareInfraConfig,
    ValueLeversConfig,
)


class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    alias: str
    type: str
    default: Any
    description: str


class SectionSchema(BaseModel):
    """Schema for one input section (e.g. people_process)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    method: str
    path: str
    description: str


class CalculatorContext(BaseModel):
    """Self-describing manifest."""
    name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]] = Field(default_factory=list)
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    interpretation_guide: str = ""


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")
        params.append(ParameterInfo(
            name=name,
            alias=field_info.alias or name,
            type=type_str,
            default=field_info.default,
            description=field_info.description or "",
        ))
    return params


_INPUT_SECTIONS = [
    ("profile", ProfileConfig, "Organisation sizing; only the currency label reaches the output"),
    ("people_process", PeopleProcessConfig, "Staffing by role, ticket / change workload, onboarding, contractors"),
    ("software_infra", SoftwareInfraConfig, "Six annual software / infrastructure cost categories"),
    ("risk_compliance", RiskComplianceConfig, "Audit effort, incidents, non-compliance exposure"),
    ("value_levers", ValueLeversConfig, "GovernOS impact factors, scaled by the scenario multiplier"),
    ("pricing", PricingConfig, "GovernOS license, add-ons and one-time implementation"),
    ("finance", FinanceConfig, "Horizon, discount rate and scenario case"),
]

_KEY_FORMULAS = [
    {"name": "Blended hourly rate", "formula": "Σ(FTE × cost) / ΣFTE / 2080 / 2"},
    {"name": "Average daily role cost", "formula": "(analyst + engineer + operator cost) / 3 / 260"},
    {"name": "Scenario multiplier", "formula": "Conservative 0.7, Base 1.0, Optimistic 1.25: scales every benefit"},
    {"name": "Risk avoided", "formula": "non_compliance_prob × impact × 0.25 × multiplier"},
    {"name": "Quarterly cash flow", "formula": "benefit/4 − cost/4 − one_time (first quarter only)"},
    {"name": "NPV", "formula": "Σ CF_i / (1 + rate/4)^i, i = 1..N"},
    {"name": "IRR", "formula": "quarterly rate with NPV = 0 (Newton-Raphson from 10%)"},
    {"name": "ROI", "formula": "horizon net / (annual cost × years + one_time)"},
]

_INTERPRETATION_GUIDE = """
PAYBACK: first quarter where cumulative cash turns non-negative, reported in
months.  None means it is not reached within the horizon.

NPV / IRR: computed on quarterly flows.  ``irr`` is per quarter;
``irr_annual_nominal`` is the same rate × 4.  Check ``irr_converged``.

TORNADO: the ``tornado`` field is a display approximation (±15% of base
NPV).  Use POST /roi/sensitivity for a real one-at-a-time re-run.

NON-FINITE VALUES: zero FTEs or zero total spend make rates and ROI
undefined; they are returned as null.
"""

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/", description="API name, version and starting point"),
    EndpointInfo(method="GET", path="/health", description="Liveness check"),
    EndpointInfo(method="GET", path="/context", description="This manifest"),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema for InputAssumptions"),
    EndpointInfo(method="GET", path="/inputs/defaults", description="Default inputs"),
    EndpointInfo(method="GET", path="/scenarios", description="Names of the bundled scenario files"),
    EndpointInfo(method="GET", path="/scenarios/{name}", description="Inputs from a bundled scenario file"),
    EndpointInfo(method="POST", path="/roi", description="Run the projection on partial or full inputs"),
    EndpointInfo(method="POST", path="/roi/compare", description="Same inputs under every scenario case"),
    EndpointInfo(method="POST", path="/roi/narrative", description="Plain-text reading + headline metrics"),
    EndpointInfo(method="POST", path="/roi/personas", description="CIO / CISO / CFO views"),
    EndpointInfo(method="POST", path="/roi/sensitivity", description="One-at-a-time NPV sensitivity"),
    EndpointInfo(method="POST", path="/share", description="Encode inputs into a share token"),
    EndpointInfo(method="GET", path="/share/{token}", description="Restore inputs from a token and run them"),
]


def build_context(detail_level: Literal["compact", "full"] = "full") -> CalculatorContext:
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    full = detail_level == "full"
    return CalculatorContext(
        name="GovernOS ROI Model",
        version="1.0",
        description=(
            "Estimates payback, NPV, IRR and ROI of adopting the GovernOS data-governance "
            "platform from people, software and risk baselines and a set of value levers."
        ),
        key_formulas=_KEY_FORMULAS if full else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if full else "",
    )


def get_input_schema() -> dict:
    """Return the full JSON Schema for InputAssumptions."""
    return InputAssumptions.model_json_schema()


def get_default_inputs() -> dict:
    """Return default inputs as a JSON-serializable dict (snake_case keys)."""
    return InputAssumptions().model_dump()
