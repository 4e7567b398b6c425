"""Tests for equity result accumulators."""
from collections import Counter

import pytest
from poker_equity.equity.results import CategoryHistogram, EquityResult, WinLoseSplit
from poker_equity.evaluation.types import HandCategory


def test_win_lose_split_record():
    tally = WinLoseSplit()
    tally.record(True)
    tally.record(True)
    tally.record(False)
    tally.record(True, split=True)

    assert (tally.wins, tally.losses, tally.splits) == (2, 1, 1)
    assert tally.total == 4
    assert tally.win_pct == 50.0
    assert tally.loss_pct == 25.0
    assert tally.split_pct == 25.0


def test_win_lose_split_display():
    assert str(WinLoseSplit(wins=1, losses=2, splits=0)) == "33.33% - 66.67% - 0.00%"
    assert str(WinLoseSplit()) == "0.00% - 0.00% - 0.00%"


def test_win_lose_split_merge():
    merged = WinLoseSplit(1, 2, 3).merge(WinLoseSplit(4, 5, 6))
    assert merged == WinLoseSplit(5, 7, 9)


def test_histogram():
    histogram = CategoryHistogram()
    histogram.record(HandCategory.ONE_PAIR)
    histogram.record(HandCategory.ONE_PAIR)
    histogram.record(HandCategory.FLUSH)

    assert histogram.count(HandCategory.ONE_PAIR) == 2
    assert histogram.count(HandCategory.QUADS) == 0
    assert histogram.total == 3
    assert histogram.percentage(HandCategory.FLUSH) == pytest.approx(100.0 / 3)
    assert list(histogram) == [(HandCategory.FLUSH, 1), (HandCategory.ONE_PAIR, 2)]

    merged = histogram.merge(CategoryHistogram(Counter({HandCategory.FLUSH: 2})))
    assert merged.count(HandCategory.FLUSH) == 3
    assert histogram.count(HandCategory.FLUSH) == 1


def test_equity_result_merge():
    first = EquityResult.empty(2)
    first.tallies[0].record(True)
    first.tallies[1].record(False)
    first.completions = 1

    second = EquityResult.empty(2)
    second.tallies[0].record(True, split=True)
    second.tallies[1].record(True, split=True)
    second.completions = 1

    merged = first.merge(second)
    assert merged.completions == 2
    assert merged.tallies[0] == WinLoseSplit(wins=1, losses=0, splits=1)
    assert merged.tallies[1] == WinLoseSplit(wins=0, losses=1, splits=1)

    with pytest.raises(ValueError, match="Cannot merge"):
        first.merge(EquityResult.empty(3))
