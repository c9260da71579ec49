from __future__ import annotations

from functools import lru_cache
from typing import Iterable

MIN_RANK = 1
MAX_RANK = 9
SEVEN_PAIRS_TILES = 14
NINE_GATES_BASE = (3, 1, 1, 1, 1, 1, 1, 1, 3)


def tile_counts(tiles: Iterable[int]) -> list[int]:
    counts = [0] * MAX_RANK
    for tile in tiles:
        if not MIN_RANK <= tile <= MAX_RANK:
            raise ValueError(f"Invalid tile rank: {tile}")
        counts[tile - 1] += 1
    return counts


@lru_cache(maxsize=20000)
def _can_form_groups(counts_tuple: tuple[int, ...]) -> bool:
    counts = list(counts_tuple)
    first = next((i for i, c in enumerate(counts) if c > 0), -1)
    if first == -1:
        return True

    if counts[first] >= 3:
        counts[first] -= 3
        if _can_form_groups(tuple(counts)):
            return True
        counts[first] += 3

    if first <= 6 and counts[first + 1] > 0 and counts[first + 2] > 0:
        counts[first] -= 1
        counts[first + 1] -= 1
        counts[first + 2] -= 1
        if _can_form_groups(tuple(counts)):
            return True
    return False


def is_complete_groups(tiles: Iterable[int]) -> bool:
    """True when the tiles split exactly into triplets and sequences."""
    counts = tile_counts(tiles)
    if sum(counts) % 3:
        return False
    return _can_form_groups(tuple(counts))


def _is_seven_pairs_counts(counts: list[int]) -> bool:
    return sum(1 for c in counts if c == 2) == 7 and all(c in {0, 2} for c in counts)


def is_seven_pairs(tiles: Iterable[int]) -> bool:
    return _is_seven_pairs_counts(tile_counts(tiles))


def is_nine_gates(tiles: Iterable[int]) -> bool:
    counts = tile_counts(tiles)
    if sum(counts) != SEVEN_PAIRS_TILES:
        return False
    return all(c >= need for c, need in zip(counts, NINE_GATES_BASE))


def is_agari(tiles: Iterable[int]) -> bool:
    """Pair plus groups, or seven distinct pairs at 14 tiles."""
    counts = tile_counts(tiles)
    if sum(counts) == SEVEN_PAIRS_TILES and _is_seven_pairs_counts(counts):
        return True
    return _is_standard_agari(counts)


def _is_standard_agari(counts: list[int]) -> bool:
    if sum(counts) % 3 != 2:
        return False
    for i, c in enumerate(counts):
        if c >= 2:
            tmp = counts[:]
            tmp[i] -= 2
            if _can_form_groups(tuple(tmp)):
                return True
    return False


def is_standard_agari(tiles: Iterable[int]) -> bool:
    return _is_standard_agari(tile_counts(tiles))
