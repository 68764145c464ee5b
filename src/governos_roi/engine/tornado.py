"""Approximate NPV tornado for display.

Not a sensitivity analysis: each driver's swing is ±15% of the base NPV
(the non-compliance driver additionally × 0.25 × scenario factor).  The
model is never re-run.  For a true one-at-a-time re-evaluation use
``governos_roi.finance.sensitivity.run_sensitivity``.
"""

from __future__ import annotations

from governos_roi.models.results import TornadoRow

TORNADO_SWING = 0.15
NON_COMPLIANCE_ROW = 3

TORNADO_LABELS: tuple[str, ...] = (
    "Ticket Deflection %",
    "Onboarding Reduction %",
    "Tools Retired",
    "Incident/Non-Compliance Impact",
    "Audit Hours Reduction %",
    "External Assess Reduction %",
    "MTTR Reduction %",
    "Value Uplift %",
)


def approximate_tornado(base_npv: float, multiplier: float) -> list[TornadoRow]:
    rows: list[TornadoRow] = []
    for i, label in enumerate(TORNADO_LABELS):
        scale = 0.25 * multiplier if i == NON_COMPLIANCE_ROW else 1
        delta = abs(base_npv * (TORNADO_SWING * scale))
        rows.append(TornadoRow(
            name=label,
            range=delta * 2,
            low=base_npv - delta,
            high=base_npv + delta,
        ))
    return rows
