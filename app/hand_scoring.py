from __future__ import annotations

from collections import Counter
from typing import Sequence

from app.agari import NINE_GATES_BASE, is_nine_gates, is_seven_pairs, tile_counts
from app.decomposition import Decomposition, Group, decompose, is_sequence
from app.schemas import WaitScore, YakuItem

READY_HAND_TILES = 13
YAKUMAN_HAN = 13
TERMINAL_TILES = {1, 9}


def _nine_gates_name(full_hand: list[int], win_tile: int) -> str:
    counts = tile_counts(full_hand)
    extras = [rank for rank, (c, need) in enumerate(zip(counts, NINE_GATES_BASE), start=1) for _ in range(c - need)]
    if extras == [win_tile]:
        return "純正九蓮宝燈"
    return "九蓮宝燈"


def _has_tanyao(tiles: list[int]) -> bool:
    return not any(t in TERMINAL_TILES for t in tiles)


def _peikou_count(decomp: Decomposition) -> int:
    count = 0
    for c in Counter(decomp.sequences).values():
        if c == 4:
            count += 2
        elif c >= 2:
            count += 1
    return count


def _is_ryanmen_wait(group: Group, win_tile: int) -> bool:
    if win_tile not in group:
        return False
    rest = list(group)
    rest.remove(win_tile)
    a, b = sorted(rest)
    return b == a + 1 and a != 1 and b != 9


def _has_pinfu(decomp: Decomposition, win_tile: int) -> bool:
    if not all(is_sequence(g) for g in decomp.groups):
        return False
    # No pair is a value pair in a single numeric suit.
    return any(_is_ryanmen_wait(g, win_tile) for g in decomp.groups)


def _decomposition_yaku(decomp: Decomposition, win_tile: int, tanyao: bool) -> list[YakuItem]:
    yaku = [YakuItem(name="清一色", han=6)]
    if tanyao:
        yaku.append(YakuItem(name="断么九", han=1))

    peikou = _peikou_count(decomp)
    if peikou == 2:
        yaku.append(YakuItem(name="二盃口", han=3))
    elif peikou == 1:
        yaku.append(YakuItem(name="一盃口", han=1))

    if _has_pinfu(decomp, win_tile):
        yaku.append(YakuItem(name="平和", han=1))
    return yaku


def _han_label(han: int) -> str:
    if han >= YAKUMAN_HAN:
        return "役満"
    return f"{han}翻"


def score_wait(hand: Sequence[int], win_tile: int) -> WaitScore:
    """Ready hand + winning tile -> best han over every reading of the hand.

    Nine gates short-circuits at the yakuman value. Seven pairs seeds the
    running maximum, then every standard decomposition competes with it;
    the first candidate reaching the maximum supplies the yaku breakdown.
    """
    if len(hand) != READY_HAND_TILES:
        raise ValueError(f"Scoring requires a {READY_HAND_TILES}-tile hand, got {len(hand)}")

    full_hand = sorted([*hand, win_tile])
    if is_nine_gates(full_hand):
        name = _nine_gates_name(full_hand, win_tile)
        return WaitScore(han=YAKUMAN_HAN, yaku=[YakuItem(name=name, han=YAKUMAN_HAN)], label=_han_label(YAKUMAN_HAN))

    best_han = 0
    best_yaku: list[YakuItem] = []
    if is_seven_pairs(full_hand):
        best_yaku = [YakuItem(name="清一色", han=6), YakuItem(name="七対子", han=2)]
        best_han = 8

    tanyao = _has_tanyao(full_hand)
    for decomp in decompose(full_hand):
        yaku = _decomposition_yaku(decomp, win_tile, tanyao)
        han = sum(item.han for item in yaku)
        if han > best_han:
            best_han = han
            best_yaku = yaku

    return WaitScore(han=best_han, yaku=best_yaku, label=_han_label(best_han))


def calculate_han(hand: Sequence[int], win_tile: int) -> int:
    return score_wait(hand, win_tile).han
