"""Shared test fixtures: sample inputs matching config/scenarios/base_case.yaml."""

from __future__ import annotations

import pytest

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


@pytest.fixture
def profile() -> ProfileConfig:
    return ProfileConfig(
        currency="GBP",
        employee_count=500,
        governed_domains=10,
        tools_in_stack=6,
    )


@pytest.fixture
def people() -> PeopleProcessConfig:
    return PeopleProcessConfig(
        analyst_ftes=6,
        analyst_cost=85_000,
        engineer_ftes=4,
        engineer_cost=110_000,
        operator_ftes=6,
        operator_cost=70_000,
        tickets_per_month=350,
        minutes_per_ticket=30,
        change_req_per_month=60,
        hours_per_change=2.5,
        onboarding_days=90,
        contractor_spend_per_month=0,
    )


@pytest.fixture
def software() -> SoftwareInfraConfig:
    return SoftwareInfraConfig(
        privacy_discovery=250_000,
        catalog_glossary=180_000,
        grc_workflow=120_000,
        data_quality_mdm=100_000,
        siem_allocation=60_000,
        cloud_ops_share=75_000,
    )


@pytest.fixture
def risk() -> RiskComplianceConfig:
    return RiskComplianceConfig(
        audit_hours_per_year=800,
        external_assess_spend=120_000,
        non_compliance_prob=0.05,
        non_compliance_impact=1_200_000,
        incidents_per_year=6,
        incident_cost=40_000,
        mttr_days=3,
    )


@pytest.fixture
def levers() -> ValueLeversConfig:
    return ValueLeversConfig(
        ticket_deflection=0.5,
        onboarding_reduction=0.6,
        coverage_uplift=0.35,
        audit_hours_reduction=0.5,
        external_assess_reduction=0.3,
        mttr_reduction=0.4,
        tools_retired_count=2,
        tools_retired_annual_cost=120_000,
        realized_value_uplift=0.2,
        value_pool_per_project=250_000,
        projects_per_year=6,
    )


@pytest.fixture
def pricing() -> PricingConfig:
    return PricingConfig(
        base_license_annual=500_000,
        implementation_one_time=120_000,
        add_on_annual=0,
    )


@pytest.fixture
def finance() -> FinanceConfig:
    return FinanceConfig(horizon_years=3, discount_rate=0.10, scenario="Base")


@pytest.fixture
def inputs(
    profile: ProfileConfig,
    people: PeopleProcessConfig,
    software: SoftwareInfraConfig,
    risk: RiskComplianceConfig,
    levers: ValueLeversConfig,
    pricing: PricingConfig,
    finance: FinanceConfig,
) -> InputAssumptions:
    return InputAssumptions(
        profile=profile,
        people_process=people,
        software_infra=software,
        risk_compliance=risk,
        value_levers=levers,
        pricing=pricing,
        finance=finance,
    )


@pytest.fixture
def zero_levers(levers: ValueLeversConfig) -> ValueLeversConfig:
    """Every lever that feeds a benefit term set to 0."""
    return levers.model_copy(update={
        "ticket_deflection": 0.0,
        "onboarding_reduction": 0.0,
        "audit_hours_reduction": 0.0,
        "external_assess_reduction": 0.0,
        "mttr_reduction": 0.0,
        "tools_retired_count": 0.0,
        "realized_value_uplift": 0.0,
    })
