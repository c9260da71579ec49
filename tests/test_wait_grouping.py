from app.wait_grouping import GROUP_COLORS, analyze_wait_patterns, ready_blocks
from app.waits import calculate_waits

BLUE, RED = GROUP_COLORS[0], GROUP_COLORS[1]


def test_no_waits_gives_empty_grouping():
    assert analyze_wait_patterns([], []) == {}


def test_shanpon_waits_get_separate_colors():
    assert ready_blocks([2, 2, 7, 7], 2) == ["S:2,2"]
    assert analyze_wait_patterns([2, 2, 7, 7], [2, 7]) == {2: [BLUE], 7: [RED]}


def test_three_sided_wait_links_shared_blocks():
    hand = [3, 4, 5, 6, 7, 9, 9]
    assert ready_blocks(hand, 5) == ["S:3,4", "S:6,7"]
    assert analyze_wait_patterns(hand, [2, 5, 8]) == {
        2: [BLUE],
        5: [BLUE, RED],
        8: [RED],
    }


def test_nobetan_waits_are_pair_blocks():
    assert ready_blocks([2, 3, 4, 5], 2) == ["P:2"]
    assert analyze_wait_patterns([2, 3, 4, 5], [2, 5]) == {2: [BLUE], 5: [RED]}


def test_seven_pairs_wait_is_pair_block():
    hand = [1, 1, 2, 2, 4, 4, 5, 5, 7, 7, 8, 8, 9]
    assert ready_blocks(hand, 9) == ["P:9"]
    assert analyze_wait_patterns(hand, [9]) == {9: [BLUE]}


def test_palette_wraps_after_six_blocks():
    hand = [1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 9]
    assert ready_blocks(hand, 4) == ["S:2,3", "S:5,6"]
    # waits 1..4 open six blocks, so the pair block of 5 is the seventh
    assert ready_blocks(hand, 5) == ["P:5"]
    colors = analyze_wait_patterns(hand, calculate_waits(hand))
    assert colors[4] == [GROUP_COLORS[1], GROUP_COLORS[5]]
    assert colors[5] == [GROUP_COLORS[0]]


def test_grouping_is_deterministic_and_uses_palette():
    hand = [1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 9]
    waits = calculate_waits(hand)
    first = analyze_wait_patterns(hand, waits)
    second = analyze_wait_patterns(hand, waits)
    assert first == second
    assert sorted(first) == waits
    for colors in first.values():
        assert colors
        assert colors == sorted(colors)
        assert set(colors) <= set(GROUP_COLORS)
