"""Engine: deterministic ROI projection."""

from governos_roi.engine.baseline import BaselineCosts, compute_baseline, compute_blended_hourly_rate
from governos_roi.engine.benefits import BenefitLevers, compute_benefits
from governos_roi.engine.cashflow import QuarterlyCashflows, build_quarterly_cashflows
from governos_roi.engine.tornado import approximate_tornado
from governos_roi.engine.roi import compare_scenarios, compute_roi

__all__ = [
    "compute_roi",
    "compare_scenarios",
    "compute_baseline",
    "compute_blended_hourly_rate",
    "compute_benefits",
    "build_quarterly_cashflows",
    "approximate_tornado",
    "BaselineCosts",
    "BenefitLevers",
    "QuarterlyCashflows",
]
