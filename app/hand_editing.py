from __future__ import annotations

from typing import Sequence

from app.agari import MAX_RANK, MIN_RANK
from app.schemas import HandAction, HandEditRequest
from app.waits import MAX_TILE_COPIES

MAX_HAND_TILES = 13


def add_tile(hand: Sequence[int], rank: int) -> list[int]:
    if not MIN_RANK <= rank <= MAX_RANK:
        raise ValueError(f"Invalid tile rank: {rank}")
    if len(hand) >= MAX_HAND_TILES:
        raise ValueError(f"Hand already holds {MAX_HAND_TILES} tiles")
    if list(hand).count(rank) >= MAX_TILE_COPIES:
        raise ValueError(f"All {MAX_TILE_COPIES} copies of {rank} are already in hand")
    return sorted([*hand, rank])


def remove_tile(hand: Sequence[int], index: int) -> list[int]:
    if not 0 <= index < len(hand):
        raise ValueError(f"No tile at index {index}")
    return [t for i, t in enumerate(hand) if i != index]


def pop_tile(hand: Sequence[int]) -> list[int]:
    return list(hand[:-1])


def clear_hand() -> list[int]:
    return []


def apply_edit(req: HandEditRequest) -> list[int]:
    """Request -> new sorted hand. The request's own tile list is never mutated.

    ``index`` and "last tile" refer to positions in the sorted hand.
    """
    tiles = sorted(req.tiles)
    if req.action == HandAction.add:
        if req.rank is None:
            raise ValueError("rank is required for add")
        return add_tile(tiles, req.rank)
    if req.action == HandAction.remove:
        if req.index is None:
            raise ValueError("index is required for remove")
        return remove_tile(tiles, req.index)
    if req.action == HandAction.pop:
        return pop_tile(tiles)
    return clear_hand()
