from __future__ import annotations

from typing import Sequence

from app.agari import is_seven_pairs
from app.decomposition import find_decompositions

GROUP_COLORS = [
    "#c4dafa",  # blue
    "#fac4c4",  # red
    "#c4fad4",  # green
    "#faf4c4",  # yellow
    "#eec4fa",  # purple
    "#fae1c4",  # orange
]


def ready_blocks(hand: Sequence[int], win_tile: int) -> list[str]:
    """Pair and set remainders that the winning tile completes, first-seen order."""
    full_hand = sorted([*hand, win_tile])
    blocks: dict[str, None] = {}

    for decomp in find_decompositions(full_hand):
        if decomp.pair == win_tile:
            blocks.setdefault(f"P:{win_tile}")
        for group in decomp.groups:
            if win_tile not in group:
                continue
            rest = list(group)
            rest.remove(win_tile)
            a, b = sorted(rest)
            blocks.setdefault(f"S:{a},{b}")

    if is_seven_pairs(full_hand):
        blocks.setdefault(f"P:{win_tile}")
    return list(blocks)


def analyze_wait_patterns(hand: Sequence[int], waits: Sequence[int]) -> dict[int, list[str]]:
    """Colour each wait by the ready blocks it satisfies.

    Waits that complete the same block share that block's colour. The
    block table lives only for this call, so equal inputs give equal output.
    """
    block_colors: dict[str, str] = {}
    tile_colors: dict[int, list[str]] = {}

    for wait in waits:
        colors: list[str] = []
        for block in ready_blocks(hand, wait):
            if block not in block_colors:
                block_colors[block] = GROUP_COLORS[len(block_colors) % len(GROUP_COLORS)]
            color = block_colors[block]
            if color not in colors:
                colors.append(color)
        tile_colors[wait] = sorted(colors)

    return tile_colors
