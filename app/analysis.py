from __future__ import annotations

import logging
from typing import Sequence

from app.hand_scoring import READY_HAND_TILES, score_wait
from app.schemas import HandAnalysis, WaitExplanation, WaitScore
from app.wait_explanation import get_wait_explanation
from app.wait_grouping import analyze_wait_patterns
from app.waits import calculate_waits, wait_count_label

logger = logging.getLogger(__name__)


def _score_waits(hand: list[int], waits: list[int]) -> dict[int, WaitScore]:
    scores: dict[int, WaitScore] = {}
    for wait in waits:
        score = score_wait(hand, wait)
        if score.han == 0:
            logger.error("Winning tile %s scored 0 han for hand %s", wait, hand)
            raise RuntimeError(f"Winning tile {wait} has no scoring reading")
        scores[wait] = score
    return scores


def analyze_hand(hand: Sequence[int]) -> HandAnalysis:
    """Hand -> waits, ready-hand scores and wait colours, all recomputed from scratch."""
    tiles = sorted(hand)
    if not tiles:
        return HandAnalysis(tiles=[], waits=[], wait_label=wait_count_label([]))

    waits = calculate_waits(tiles)
    colors = analyze_wait_patterns(tiles, waits) if waits else {}
    scores = _score_waits(tiles, waits) if len(tiles) == READY_HAND_TILES else {}
    logger.debug("Analyzed hand %s: waits=%s", tiles, waits)
    return HandAnalysis(
        tiles=tiles,
        waits=waits,
        wait_label=wait_count_label(waits),
        scores=scores,
        colors=colors,
    )


def explain_wait(hand: Sequence[int], win_tile: int) -> WaitExplanation:
    tiles = sorted(hand)
    waits = calculate_waits(tiles)
    if win_tile not in waits:
        raise ValueError(f"{win_tile} is not a winning tile for this hand")

    score = score_wait(tiles, win_tile) if len(tiles) == READY_HAND_TILES else None
    return WaitExplanation(
        win_tile=win_tile,
        explanation=get_wait_explanation(tiles, win_tile, waits),
        score=score,
    )
