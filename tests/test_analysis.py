import pytest

from app.analysis import analyze_hand, explain_wait
from app.wait_grouping import GROUP_COLORS

NINE_GATES = [1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 9]
SEVEN_PAIRS_READY = [1, 1, 2, 2, 4, 4, 5, 5, 7, 7, 8, 8, 9]


def test_empty_hand_analysis():
    result = analyze_hand([])
    assert result.waits == []
    assert result.scores == {}
    assert result.colors == {}
    assert result.wait_label == "不聴"


def test_nine_gates_analysis():
    result = analyze_hand(NINE_GATES)
    assert result.waits == list(range(1, 10))
    assert result.wait_label == "9面張"
    assert sorted(result.scores) == list(range(1, 10))
    assert all(score.han == 13 and score.label == "役満" for score in result.scores.values())
    assert sorted(result.colors) == list(range(1, 10))


def test_seven_pairs_analysis():
    result = analyze_hand(SEVEN_PAIRS_READY)
    assert result.waits == [9]
    assert result.scores[9].han == 8
    assert result.colors == {9: [GROUP_COLORS[0]]}


def test_short_hand_has_waits_and_colors_but_no_scores():
    result = analyze_hand([9, 3, 7, 4, 9, 5, 6])
    assert result.tiles == [3, 4, 5, 6, 7, 9, 9]
    assert result.waits == [2, 5, 8]
    assert result.scores == {}
    assert result.colors == {2: [GROUP_COLORS[0]], 5: GROUP_COLORS[:2], 8: [GROUP_COLORS[1]]}


def test_hand_without_waits_has_no_grouping():
    result = analyze_hand([1, 1, 1, 2, 3, 4, 5, 6, 7, 9, 9, 9])
    assert result.waits == []
    assert result.colors == {}
    assert result.scores == {}


def test_analysis_is_repeatable():
    assert analyze_hand(NINE_GATES) == analyze_hand(NINE_GATES)


def test_explain_wait_with_score():
    result = explain_wait(SEVEN_PAIRS_READY, 9)
    assert result.explanation == "七対子 (単騎)"
    assert result.score is not None
    assert result.score.han == 8


def test_explain_wait_short_hand_has_no_score():
    result = explain_wait([3, 4, 5, 6, 7, 9, 9], 5)
    assert result.explanation == "2との両面"
    assert result.score is None


def test_explain_wait_rejects_non_winning_tile():
    with pytest.raises(ValueError):
        explain_wait([3, 4, 5, 6, 7, 9, 9], 9)
