from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from app.analysis import analyze_hand, explain_wait
from app.config import settings
from app.hand_editing import apply_edit
from app.schemas import (
    ExplainRequest,
    HandAnalysis,
    HandEditRequest,
    HandEditResponse,
    HandInput,
    StructureExplanation,
    WaitExplanation,
)
from app.structure_explanation import analyze_structure
from app.validators import validate_explain_request, validate_hand
from app.waits import calculate_waits

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pinzu Wait Analyzer", version="0.1.0")


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": "Pinzu Wait Analyzer API",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/analyze", response_model=HandAnalysis)
def analyze(req: HandInput) -> HandAnalysis:
    validate_hand(req)
    logger.info("Analyze request: tiles=%s", req.tiles)
    return analyze_hand(req.tiles)


@app.post("/api/v1/hand/edit", response_model=HandEditResponse)
def edit_hand(req: HandEditRequest) -> HandEditResponse:
    validate_hand(req)
    try:
        tiles = apply_edit(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info("Hand edit %s: %s -> %s", req.action.value, req.tiles, tiles)
    return HandEditResponse(tiles=tiles, analysis=analyze_hand(tiles))


@app.post("/api/v1/explain", response_model=WaitExplanation)
def explain(req: ExplainRequest) -> WaitExplanation:
    validate_explain_request(req)
    try:
        return explain_wait(req.tiles, req.win_tile)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/api/v1/structure", response_model=StructureExplanation)
def structure(req: HandInput) -> StructureExplanation:
    validate_hand(req)
    waits = calculate_waits(req.tiles)
    return analyze_structure(req.tiles, waits)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
