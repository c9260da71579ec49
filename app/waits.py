from __future__ import annotations

from typing import Sequence

from app.agari import MAX_RANK, MIN_RANK, is_agari, is_complete_groups, tile_counts

MAX_TILE_COPIES = 4


def calculate_waits(hand: Sequence[int]) -> list[int]:
    """Ranks that turn the hand into a complete shape when drawn."""
    counts = tile_counts(hand)
    waits: list[int] = []
    for rank in range(MIN_RANK, MAX_RANK + 1):
        if counts[rank - 1] >= MAX_TILE_COPIES:
            continue
        test_hand = sorted([*hand, rank])
        size = len(test_hand)
        if size % 3 == 0:
            if is_complete_groups(test_hand):
                waits.append(rank)
        elif size % 3 == 2:
            if is_agari(test_hand):
                waits.append(rank)
    return waits


def wait_count_label(waits: Sequence[int]) -> str:
    if not waits:
        return "不聴"
    return f"{len(waits)}面張"
