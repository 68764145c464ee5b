"""Time-value formulas: NPV, IRR, ROI % on quarterly cash flows.

Key formulas:
  NPV = Σ CF_i / (1 + r_annual / 4)^i,  i = 1..N
        (annual rate converted by simple division, not a compounded root)
  IRR = quarterly rate where NPV = 0  (Newton-Raphson from 10%)
  ROI = net / (annual cost × years + one-time cost)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

QUARTERS_PER_YEAR = 4
IRR_GUESS = 0.10
IRR_MAX_ITER = 100
IRR_TOLERANCE = 1e-7


@dataclass(frozen=True)
class IRRResult:
    """Outcome of the Newton-Raphson search."""

    rate: float
    """Quarterly periodic rate (last iterate if not converged)."""
    converged: bool
    iterations: int


def compute_npv(cash_flows: list[float], annual_rate: float, periods_per_year: int = QUARTERS_PER_YEAR) -> float:
    """Net Present Value of periodic cash flows.

    Parameters
    ----------
    cash_flows : list[float]
        Net cash per period. Index 0 = period 1 (discounted once).
    annual_rate : float
        Annual discount rate (e.g. 0.10 for 10%).
    periods_per_year : int
        4 for quarterly flows.

    Returns
    -------
    float
        NPV; 0.0 for an empty series.
    """
    if not cash_flows:
        return 0.0

    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(1, len(flows) + 1, dtype=float)
    with np.errstate(all="ignore"):
        return float(np.sum(flows / (1 + annual_rate / periods_per_year) ** periods))


def _npv_and_slope(flows: np.ndarray, periods: np.ndarray, rate: float) -> tuple[float, float]:
    """NPV at a periodic ``rate`` and its derivative d(NPV)/d(rate)."""
    with np.errstate(all="ignore"):
        base = 1 + rate
        f = np.sum(flows / base ** periods)
        df = np.sum(-periods * flows / base ** (periods + 1))
    return float(f), float(df)


def compute_irr(
    cash_flows: list[float],
    guess: float = IRR_GUESS,
    max_iter: int = IRR_MAX_ITER,
    tol: float = IRR_TOLERANCE,
) -> IRRResult:
    """Periodic Internal Rate of Return via Newton-Raphson.

    Each step is ``rate ← rate − f(rate) / f'(rate)``.  A step landing on a
    non-finite value halves the current rate instead.  Stops when a step
    moves less than ``tol``; otherwise returns the last iterate with
    ``converged=False``.  An empty series has no IRR (``nan``).
    """
    if not cash_flows:
        return IRRResult(rate=math.nan, converged=False, iterations=0)

    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(1, len(flows) + 1, dtype=float)

    rate = guess
    for i in range(1, max_iter + 1):
        f, df = _npv_and_slope(flows, periods, rate)
        with np.errstate(divide="ignore", invalid="ignore"):
            new_rate = float(rate - np.float64(f) / np.float64(df))
        if math.isfinite(new_rate) and abs(new_rate - rate) < tol:
            return IRRResult(rate=new_rate, converged=True, iterations=i)
        rate = new_rate if math.isfinite(new_rate) else rate * 0.5

    logger.debug("IRR did not converge in %d iterations (last rate %r)", max_iter, rate)
    return IRRResult(rate=rate, converged=False, iterations=max_iter)


def compute_roi_pct(net: float, annual_cost: float, horizon_years: int, one_time_cost: float) -> float:
    """Horizon net over total spend.  Zero spend → ±inf (or nan for zero net)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(net) / np.float64(annual_cost * horizon_years + one_time_cost))
