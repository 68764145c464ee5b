"""Result models: ROI engine output contracts."""

from governos_roi.models.results import (
    BaselineContext,
    BenefitBar,
    CumulativePoint,
    DerivedFinancials,
    PersonaView,
    QuarterRow,
    RoiSummary,
    TornadoRow,
)

__all__ = [
    "BaselineContext",
    "BenefitBar",
    "CumulativePoint",
    "DerivedFinancials",
    "PersonaView",
    "QuarterRow",
    "RoiSummary",
    "TornadoRow",
]
