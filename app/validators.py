from collections import Counter

from fastapi import HTTPException

from app.hand_editing import MAX_HAND_TILES
from app.schemas import ExplainRequest, HandInput
from app.waits import MAX_TILE_COPIES


def validate_hand(req: HandInput) -> None:
    if len(req.tiles) > MAX_HAND_TILES:
        raise HTTPException(status_code=422, detail=f"Hand must hold at most {MAX_HAND_TILES} tiles")

    for rank, count in Counter(req.tiles).items():
        if count > MAX_TILE_COPIES:
            raise HTTPException(status_code=422, detail=f"Tile appears {MAX_TILE_COPIES + 1}+ times in hand: {rank}")


def validate_explain_request(req: ExplainRequest) -> None:
    validate_hand(req)
    if not req.tiles:
        raise HTTPException(status_code=422, detail="Hand is empty")
