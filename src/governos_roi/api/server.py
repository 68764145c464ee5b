"""FastAPI server: HTTP access to the GovernOS ROI engine.

Run with:
    uvicorn governos_roi.api.server:app --reload --port 8000

Or:
    governos-roi-api

Endpoints:
    GET  /                  : API name, version and starting point
    GET  /health            : liveness check
    GET  /context           : self-describing manifest
    GET  /schema            : JSON Schema for InputAssumptions
    GET  /inputs/defaults   : complete default inputs
    GET  /scenarios         : bundled scenario names
    GET  /scenarios/{name}  : inputs from a bundled scenario file
    POST /roi               : run the projection (partial or full inputs)
    POST /roi/compare       : Conservative / Base / Optimistic side by side
    POST /roi/narrative     : plain-text reading + headline metrics
    POST /roi/personas      : CIO / CISO / CFO views
    POST /roi/sensitivity   : one-at-a-time NPV sensitivity
    POST /share             : encode inputs into a URL-safe token
    GET  /share/{token}     : restore inputs and run them

Non-finite numbers (nan/inf from degenerate inputs) are returned as null.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from governos_roi.api.context import build_context, get_default_inputs, get_input_schema
from governos_roi.api.narrative import generate_narrative, generate_scenario_comparison
from governos_roi.api.personas import build_persona_views
from governos_roi.api.utils import sanitize_for_json
from governos_roi.config.assumptions import InputAssumptions
from governos_roi.config.loader import list_scenarios, load_named_scenario
from governos_roi.config.share import ShareTokenError, decode_state, encode_state, share_query
from governos_roi.engine.roi import compare_scenarios, compute_roi
from governos_roi.finance.sensitivity import run_sensitivity

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="GovernOS ROI Model API",
    version="1.0",
    description=(
        "ROI projection for adopting the GovernOS data-governance platform: "
        "baseline costs, benefit levers, quarterly cash flows, payback, NPV, IRR "
        "and persona views. Start with GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class RoiRequest(BaseModel):
    """Request body for /roi and friends. Missing fields use defaults."""
    inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full InputAssumptions (snake_case keys). "
                    "Example: {'finance': {'scenario': 'Optimistic', 'horizon_years': 5}}",
    )


class SensitivityRequest(BaseModel):
    """Request body for /roi/sensitivity."""
    inputs: dict[str, Any] = Field(default_factory=dict)
    sweep_params: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of sweep parameters. "
                    "Format: [{'name': 'Deflection', 'path': 'value_levers.ticket_deflection', "
                    "'low_pct': -0.15, 'high_pct': 0.15}]",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_inputs(overrides: dict[str, Any]) -> InputAssumptions:
    """Build InputAssumptions from partial overrides merged onto defaults.

    Raises ``HTTPException(422)`` when the merged inputs do not validate.
    """
    merged = _deep_merge(get_default_inputs(), overrides)
    try:
        return InputAssumptions.model_validate(merged)
    except ValidationError as e:
        logger.warning("Rejected inputs: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "GovernOS ROI Model API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds formulas + interpretation guide",
    ),
):
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    return get_input_schema()


@app.get("/inputs/defaults")
def get_defaults():
    return get_default_inputs()


@app.get("/scenarios")
def get_scenarios():
    return {"scenarios": list_scenarios()}


@app.get("/scenarios/{name}")
def get_scenario(name: str):
    try:
        inputs = load_named_scenario(name)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return inputs.model_dump()


@app.post("/roi")
def roi(req: RoiRequest):
    """Run the projection. Returns the full DerivedFinancials."""
    inputs = _build_inputs(req.inputs)
    result = compute_roi(inputs)
    return sanitize_for_json(result.model_dump())


@app.post("/roi/compare")
def roi_compare(req: RoiRequest):
    """Run the same inputs under every scenario case."""
    inputs = _build_inputs(req.inputs)
    results = compare_scenarios(inputs)
    return sanitize_for_json({
        "results": {case: r.model_dump() for case, r in results.items()},
        "comparison_narrative": generate_scenario_comparison(results),
    })


@app.post("/roi/narrative")
def roi_narrative(req: RoiRequest):
    inputs = _build_inputs(req.inputs)
    result = compute_roi(inputs)
    s = result.summary
    return sanitize_for_json({
        "narrative": generate_narrative(result),
        "headline_metrics": {
            "payback_months": s.payback_months,
            "year1_net": s.year1_net,
            "roi_pct": s.roi_pct,
            "npv": s.npv,
            "irr": s.irr_annual_nominal,
            "irr_quarterly": s.irr,
            "irr_converged": s.irr_converged,
            "three_yr_net": s.three_yr_net,
        },
    })


@app.post("/roi/personas")
def roi_personas(req: RoiRequest):
    inputs = _build_inputs(req.inputs)
    views = build_persona_views(compute_roi(inputs))
    return sanitize_for_json({name: view.model_dump() for name, view in views.items()})


@app.post("/roi/sensitivity")
def roi_sensitivity(req: SensitivityRequest):
    """One-at-a-time sensitivity: re-runs the model per swept input."""
    inputs = _build_inputs(req.inputs)

    sweeps = None
    if req.sweep_params:
        try:
            sweeps = [
                (sp.get("name", sp["path"]), sp["path"], sp.get("low_pct", -0.15), sp.get("high_pct", 0.15))
                for sp in req.sweep_params
            ]
        except KeyError as e:
            raise HTTPException(status_code=400, detail=f"Sweep parameter missing key {e}")

    result = run_sensitivity(inputs, sweeps)
    return sanitize_for_json({
        "base_npv": result.base_npv,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "npv_at_low": bar.npv_at_low,
                "npv_at_high": bar.npv_at_high,
                "delta_npv": bar.delta_npv,
            }
            for bar in result.bars
        ],
    })


@app.post("/share")
def share(req: RoiRequest):
    inputs = _build_inputs(req.inputs)
    return {"token": encode_state(inputs), "query": share_query(inputs)}


@app.get("/share/{token}")
def restore_shared(token: str):
    try:
        inputs = decode_state(token)
    except ShareTokenError as e:
        logger.warning("Bad share token: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return sanitize_for_json({
        "inputs": inputs.model_dump(),
        "result": compute_roi(inputs).model_dump(),
    })


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "governos_roi.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
