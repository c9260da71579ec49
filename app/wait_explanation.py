from __future__ import annotations

from typing import Sequence

from app.agari import is_seven_pairs
from app.decomposition import Decomposition, Group, find_decompositions, is_sequence, is_triplet

SEVEN_PAIRS_LABEL = "七対子 (単騎)"
TANKI_LABEL = "単騎"
KANCHAN_LABEL = "カンチャン"
PENCHAN_LABEL = "ペンチャン"
RYANMEN_SUFFIX = "との両面"
NOBETAN_SUFFIX = "とのノベタン"
SHANPON_SUFFIX = "とのシャンポン"
SANMENCHAN_SUFFIX = "との三面張"


def _pair_wait_tag(decomp: Decomposition, win_tile: int, waits: set[int]) -> str:
    group_tiles = {t for group in decomp.groups for t in group}
    if {win_tile + 1, win_tile + 2, win_tile + 3} <= group_tiles and win_tile + 3 in waits:
        return f"{win_tile + 3}{NOBETAN_SUFFIX}"
    if {win_tile - 1, win_tile - 2, win_tile - 3} <= group_tiles and win_tile - 3 in waits:
        return f"{win_tile - 3}{NOBETAN_SUFFIX}"
    return TANKI_LABEL


def _sequence_wait_tag(group: Group, win_tile: int, waits: set[int]) -> str:
    position = group.index(win_tile)
    if position == 1:
        return KANCHAN_LABEL
    partner = win_tile + 3 if position == 0 else win_tile - 3
    if partner in waits:
        return f"{partner}{RYANMEN_SUFFIX}"
    return PENCHAN_LABEL


def _decomposition_tags(decomp: Decomposition, win_tile: int, waits: set[int]) -> set[str]:
    tags: set[str] = set()
    if decomp.pair == win_tile:
        tags.add(_pair_wait_tag(decomp, win_tile, waits))

    triplet = next((g for g in decomp.groups if win_tile in g and is_triplet(g)), None)
    if triplet and decomp.pair in waits:
        tags.add(f"{decomp.pair}{SHANPON_SUFFIX}")

    # Only the first sequence holding the tile counts within one reading.
    sequence = next((g for g in decomp.groups if win_tile in g and is_sequence(g)), None)
    if sequence:
        tags.add(_sequence_wait_tag(sequence, win_tile, waits))
    return tags


def _merge_ryanmen(tags: set[str]) -> set[str]:
    ryanmen = [tag for tag in tags if tag.endswith(RYANMEN_SUFFIX)]
    if len(ryanmen) < 2:
        return tags
    partners = sorted({int(tag.removesuffix(RYANMEN_SUFFIX)) for tag in ryanmen})
    merged = tags - set(ryanmen)
    merged.add(",".join(str(p) for p in partners) + SANMENCHAN_SUFFIX)
    return merged


def get_wait_explanation(hand: Sequence[int], win_tile: int, all_waits: Sequence[int]) -> str:
    """Name the wait shape(s) that make ``win_tile`` a winning tile."""
    full_hand = sorted([*hand, win_tile])
    if is_seven_pairs(full_hand):
        return SEVEN_PAIRS_LABEL

    decompositions = find_decompositions(full_hand)
    if not decompositions:
        return ""

    waits = set(all_waits)
    tags: set[str] = set()
    for decomp in decompositions:
        tags |= _decomposition_tags(decomp, win_tile, waits)

    return " / ".join(sorted(_merge_ryanmen(tags)))
