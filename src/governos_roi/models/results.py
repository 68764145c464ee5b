"""Result types: the contract between the ROI engine and its consumers.

Only ``BenefitBar.value`` and ``CumulativePoint.value`` are rounded by the
engine (half-up, whole currency units).  Everything in ``RoiSummary`` and
``cashflows`` is left unrounded for the display layer to format.

Non-finite values (``nan`` / ``inf``) can appear on degenerate input, e.g.
zero total FTEs or zero total cost; they are never replaced by the engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Baseline & benefits
# ═══════════════════════════════════════════════════════════════════════════

class BaselineContext(_Frozen):
    """Current-state annual spend, seven categories."""

    people: float
    """Role payroll + annualised contractor spend."""
    tickets_changes: float
    """Ticket and change-request effort at the blended hourly rate."""
    onboarding: float
    """Onboarding days × average daily role cost."""
    software: float
    compliance_audit: float
    """Internal audit hours at the blended rate + external assessor spend."""
    expected_loss: float
    """Non-compliance probability × impact."""
    incidents: float

    def as_dict(self) -> dict[str, float]:
        """The seven categories in display order."""
        return {
            "people": self.people,
            "tickets_changes": self.tickets_changes,
            "onboarding": self.onboarding,
            "software": self.software,
            "compliance_audit": self.compliance_audit,
            "expected_loss": self.expected_loss,
            "incidents": self.incidents,
        }


class BenefitBar(_Frozen):
    """One annualised benefit lever, rounded to whole currency units."""

    name: str
    value: float


# ═══════════════════════════════════════════════════════════════════════════
# Cash flow & summary
# ═══════════════════════════════════════════════════════════════════════════

class CumulativePoint(_Frozen):
    """Running cumulative cash position at the end of one quarter."""

    name: str
    """Period label, ``Q1`` … ``Qn``."""
    value: float


class RoiSummary(_Frozen):
    """Headline metrics over the full horizon (unrounded)."""

    payback_quarter: int | None
    """First 1-based quarter with cumulative position ≥ 0; None = not reached."""
    payback_months: int | None
    """``payback_quarter × 3``; None = not reached within the horizon."""
    year1_net: float
    three_yr_net: float
    """Net cash over the whole horizon (named for the default 3-year view)."""
    roi_pct: float
    """three_yr_net / (annual cost × years + one-time cost), as a fraction."""
    npv: float
    irr: float
    """Quarterly periodic IRR."""
    irr_annual_nominal: float
    """``irr × 4``: the nominal annual rate quoted in the calculator UI."""
    irr_converged: bool
    """False when the Newton iteration ran out of budget; ``irr`` is then the last iterate."""
    irr_iterations: int

    annual_benefits: float
    annual_costs: float
    one_time_cost: float


class TornadoRow(_Frozen):
    """Approximate NPV swing for one driver (display aid, not a re-evaluation)."""

    name: str
    range: float
    low: float
    high: float


# ═══════════════════════════════════════════════════════════════════════════
# Complete engine output
# ═══════════════════════════════════════════════════════════════════════════

class DerivedFinancials(_Frozen):
    """Everything ``compute_roi`` produces for one input snapshot."""

    currency: str
    baseline_context: BaselineContext
    benefit_bars: list[BenefitBar]
    """Eight levers in fixed order; persona views slice by index."""
    cashflows: list[float]
    """Net cash per quarter, length ``horizon_years × 4``."""
    cumulative: list[CumulativePoint]
    summary: RoiSummary
    tornado: list[TornadoRow]


# ═══════════════════════════════════════════════════════════════════════════
# Persona views
# ═══════════════════════════════════════════════════════════════════════════

class QuarterRow(_Frozen):
    """One row of the CFO quarterly table."""

    name: str
    cash: float
    cum: float


class PersonaView(_Frozen):
    """What one executive persona sees."""

    persona: str
    title: str
    metrics: list[BenefitBar]
    quarters: list[QuarterRow] = []
    npv: float | None = None
    irr: float | None = None
    """Annual nominal IRR (quarterly rate × 4), as the CFO view quotes it."""
