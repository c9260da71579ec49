from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from app.agari import tile_counts

WINNING_HAND_TILES = 14

Group = tuple[int, int, int]


def is_triplet(group: Group) -> bool:
    return group[0] == group[1] == group[2]


def is_sequence(group: Group) -> bool:
    return group[1] == group[0] + 1 and group[2] == group[0] + 2


@dataclass(frozen=True)
class Decomposition:
    pair: int
    groups: tuple[Group, ...]

    @property
    def sequences(self) -> list[Group]:
        return [g for g in self.groups if is_sequence(g)]

    @property
    def triplets(self) -> list[Group]:
        return [g for g in self.groups if is_triplet(g)]

    @property
    def tiles(self) -> list[int]:
        tiles = [self.pair, self.pair]
        for group in self.groups:
            tiles.extend(group)
        return sorted(tiles)


def _collect_groupings(counts: list[int]) -> list[list[Group]]:
    groupings: list[list[Group]] = []

    def dfs(work: list[int], current: list[Group]) -> None:
        first = next((i for i, c in enumerate(work) if c > 0), -1)
        if first == -1:
            groupings.append(current.copy())
            return

        rank = first + 1
        if work[first] >= 3:
            work[first] -= 3
            current.append((rank, rank, rank))
            dfs(work, current)
            current.pop()
            work[first] += 3

        if first <= 6 and work[first + 1] > 0 and work[first + 2] > 0:
            work[first] -= 1
            work[first + 1] -= 1
            work[first + 2] -= 1
            current.append((rank, rank + 1, rank + 2))
            dfs(work, current)
            current.pop()
            work[first] += 1
            work[first + 1] += 1
            work[first + 2] += 1

    dfs(counts[:], [])
    return groupings


def find_decompositions(tiles: Iterable[int]) -> list[Decomposition]:
    """Every (pair, groups) split of the tiles, in search order.

    Works for any pair-plus-groups size; structurally identical results
    reached through different branches are kept.
    """
    counts = tile_counts(tiles)
    results: list[Decomposition] = []
    for i, c in enumerate(counts):
        if c < 2:
            continue
        work = counts[:]
        work[i] -= 2
        for groups in _collect_groupings(work):
            results.append(Decomposition(pair=i + 1, groups=tuple(groups)))
    return results


def decompose(tiles: Iterable[int]) -> list[Decomposition]:
    tiles = list(tiles)
    if len(tiles) != WINNING_HAND_TILES:
        raise ValueError(f"Decomposition requires {WINNING_HAND_TILES} tiles, got {len(tiles)}")
    return find_decompositions(tiles)
