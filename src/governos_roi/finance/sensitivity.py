"""Sensitivity / tornado analysis: true one-at-a-time re-evaluation.

Unlike the engine's display tornado (a fixed ±15% of base NPV), this
re-runs ``compute_roi`` once per swept value with a single input changed
and everything else held at base.  Produces bars sorted by NPV swing.

Default sweep set (the eight display-tornado drivers, each ±15%):
  - value_levers.ticket_deflection
  - value_levers.onboarding_reduction
  - value_levers.tools_retired_count
  - risk_compliance.non_compliance_impact
  - value_levers.audit_hours_reduction
  - value_levers.external_assess_reduction
  - value_levers.mttr_reduction
  - value_levers.realized_value_uplift
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel

from governos_roi.config.assumptions import InputAssumptions
from governos_roi.engine.roi import compute_roi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into InputAssumptions (e.g. 'value_levers.ticket_deflection')."""

    base_value: float
    low_value: float
    high_value: float

    npv_at_low: float
    npv_at_high: float

    delta_npv: float
    """abs(npv_at_high − npv_at_low): total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_npv: float
    bars: list[TornadoBar] = field(default_factory=list)
    """Sorted by delta_npv (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Ticket Deflection %", "value_levers.ticket_deflection", -0.15, 0.15),
    ("Onboarding Reduction %", "value_levers.onboarding_reduction", -0.15, 0.15),
    ("Tools Retired", "value_levers.tools_retired_count", -0.15, 0.15),
    ("Incident/Non-Compliance Impact", "risk_compliance.non_compliance_impact", -0.15, 0.15),
    ("Audit Hours Reduction %", "value_levers.audit_hours_reduction", -0.15, 0.15),
    ("External Assess Reduction %", "value_levers.external_assess_reduction", -0.15, 0.15),
    ("MTTR Reduction %", "value_levers.mttr_reduction", -0.15, 0.15),
    ("Value Uplift %", "value_levers.realized_value_uplift", -0.15, 0.15),
]


def _get_nested_attr(obj: object, path: str) -> float:
    """Get a nested attribute via dot-path string."""
    current = obj
    for part in path.split("."):
        current = getattr(current, part)
    return float(current)


def _with_nested_value(model: BaseModel, path: str, value: float) -> BaseModel:
    """Return a copy of a frozen model tree with one leaf replaced.

    Integer-typed leaves are rounded so the copy stays well-typed.
    """
    head, _, rest = path.partition(".")
    if rest:
        child = getattr(model, head)
        return model.model_copy(update={head: _with_nested_value(child, rest, value)})

    field_info = type(model).model_fields.get(head)
    if field_info is None:
        raise AttributeError(head)
    if field_info.annotation is int:
        value = round(value)
    return model.model_copy(update={head: value})


def run_sensitivity(
    inputs: InputAssumptions,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run sensitivity analysis around ``inputs``.

    Parameters
    ----------
    inputs : InputAssumptions
        Base case.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by NPV impact.  Paths that do not resolve to a
        numeric input are skipped.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_npv = compute_roi(inputs).summary.npv

    bars: list[TornadoBar] = []
    for name, path, low_pct, high_pct in sweeps:
        try:
            base_val = _get_nested_attr(inputs, path)
        except (AttributeError, TypeError, ValueError):
            logger.warning("Skipping sensitivity sweep %r: %r is not a numeric input", name, path)
            continue

        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        npv_low = compute_roi(_with_nested_value(inputs, path, low_val)).summary.npv
        npv_high = compute_roi(_with_nested_value(inputs, path, high_val)).summary.npv

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            npv_at_low=npv_low,
            npv_at_high=npv_high,
            delta_npv=abs(npv_high - npv_low),
        ))

    bars.sort(key=lambda b: b.delta_npv, reverse=True)

    return SensitivityResult(base_npv=base_npv, bars=bars)
