from __future__ import annotations

import logging
from typing import Sequence

from openai import OpenAI

from app.config import settings
from app.schemas import StructureExplanation

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a mahjong logic expert.
Return JSON only, with keys: explanation (string, at most 2 sentences), shapes (list of strings).
Explain why the given waits arise by decomposing the hand into standard shapes
(ryanmen, kanchan, penchan, shanpon, tanki, nobetan, sanmenchan, iipeikou-shape).
Be concise and logical. Focus on the combinatorial structure.
Example for 1112345678999: "Nine Gates. The 111 and 999 triplets let the 2-8 run
bond with any tile 1-9 to form a pair or a sequence." """

FALLBACK_EXPLANATION = "Unable to analyze complex shape connectivity at this moment."
FALLBACK_SHAPES = ["Complex Poly-Wait"]


def _fallback_result() -> StructureExplanation:
    return StructureExplanation(explanation=FALLBACK_EXPLANATION, shapes=list(FALLBACK_SHAPES))


def _user_prompt(hand: Sequence[int], waits: Sequence[int]) -> str:
    tiles = ", ".join(str(t) for t in sorted(hand))
    wait_tiles = ", ".join(str(w) for w in waits)
    return (
        f"The hand is single-suit (pinzu) tiles: [{tiles}].\n"
        f"The solver determined the waiting tiles are: [{wait_tiles}].\n"
        "Return strict JSON with keys: explanation, shapes."
    )


def analyze_structure(hand: Sequence[int], waits: Sequence[int]) -> StructureExplanation:
    """Hand + waits -> decorative explanation from a language model.

    Supplementary only: every failure degrades to a fixed fallback.
    """
    if not hand or not waits:
        return StructureExplanation(explanation="", shapes=[])
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; fallback structure explanation is used.")
        return _fallback_result()

    try:
        client = OpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout_seconds)
        response = client.chat.completions.create(
            model=settings.openai_model,
            temperature=0,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": _user_prompt(hand, waits)},
            ],
        )
        output_text = response.choices[0].message.content
        if not output_text:
            raise ValueError("empty response from model")
        return StructureExplanation.model_validate_json(output_text)
    except Exception as exc:
        logger.error("Structure explanation failed: %s", exc)
        return _fallback_result()
