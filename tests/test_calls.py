"""Tests for the point count to call mapping."""

import pytest

from scoring.calls import CALLS, GAME_CALL, LOVE_CALL, MAX_POINTS, list_calls, score_to_call


@pytest.mark.parametrize("count, call", [
    (0, "love"),
    (1, "15"),
    (2, "30"),
    (3, "40"),
    (4, "game"),
])
def test_valid_counts_have_calls(count, call):
    """Counts 0-4 map to the fixed tennis calls."""
    assert score_to_call(count) == call


@pytest.mark.parametrize("count", [-1, 5, 6, 40, 255])
def test_out_of_range_counts_have_no_call(count):
    """Anything outside 0-4 has no call."""
    assert score_to_call(count) is None


def test_non_integer_counts_have_no_call():
    """Floats, strings and bools are not point counts."""
    assert score_to_call(1.0) is None
    assert score_to_call("1") is None
    assert score_to_call(True) is None


def test_zero_and_four_are_named_not_numeric():
    """Love and game are never rendered as "0" or "4"."""
    assert "0" not in CALLS.values()
    assert "4" not in CALLS.values()
    assert LOVE_CALL == "love"
    assert GAME_CALL == "game"


def test_list_calls_in_order():
    """Calls are listed from love up to game."""
    assert list_calls() == ["love", "15", "30", "40", "game"]
    assert len(list_calls()) == MAX_POINTS + 1
