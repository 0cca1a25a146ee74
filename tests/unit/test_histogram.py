"""Tests for the game-length histogram."""

import pytest

from warsim.histogram.state import TurnHistogram


def test_add_and_lookup() -> None:
    hist = TurnHistogram()
    hist.add(120)
    hist.add(120)
    hist.add(300, 5)

    assert hist[120] == 2
    assert hist[300] == 5
    assert hist[999] == 0
    assert hist.total_games() == 7
    assert len(hist) == 2


def test_items_sorted_by_length() -> None:
    hist = TurnHistogram({50: 1, 10: 3, 30: 2})
    assert hist.items() == [(10, 3), (30, 2), (50, 1)]
    assert list(hist) == [10, 30, 50]


def test_merge_adds_counts() -> None:
    a = TurnHistogram({10: 1, 20: 2})
    b = TurnHistogram({20: 3, 40: 1})

    a.merge(b)

    assert a.to_dict() == {10: 1, 20: 5, 40: 1}
    assert b.to_dict() == {20: 3, 40: 1}


def test_zero_count_is_not_stored() -> None:
    hist = TurnHistogram({10: 0})
    assert len(hist) == 0
    assert hist == TurnHistogram()


def test_rejects_negative_values() -> None:
    hist = TurnHistogram()
    with pytest.raises(ValueError):
        hist.add(-1)
    with pytest.raises(ValueError):
        hist.add(10, -2)
