from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, conint

Rank = conint(ge=1, le=9)


class HandAction(str, Enum):
    add = "add"
    remove = "remove"
    pop = "pop"
    clear = "clear"


class HandInput(BaseModel):
    tiles: list[Rank] = Field(default_factory=list)


class HandEditRequest(HandInput):
    action: HandAction
    rank: Rank | None = None
    index: conint(ge=0) | None = None


class ExplainRequest(HandInput):
    win_tile: Rank


class YakuItem(BaseModel):
    name: str
    han: int


class WaitScore(BaseModel):
    han: int
    yaku: list[YakuItem] = Field(default_factory=list)
    label: str


class HandAnalysis(BaseModel):
    tiles: list[int]
    waits: list[int] = Field(default_factory=list)
    wait_label: str
    scores: dict[int, WaitScore] = Field(default_factory=dict)
    colors: dict[int, list[str]] = Field(default_factory=dict)


class HandEditResponse(BaseModel):
    tiles: list[int]
    analysis: HandAnalysis


class WaitExplanation(BaseModel):
    win_tile: int
    explanation: str
    score: WaitScore | None = None


class StructureExplanation(BaseModel):
    explanation: str
    shapes: list[str] = Field(default_factory=list)
