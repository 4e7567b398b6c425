"""Result accumulators for equity runs."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from poker_equity.evaluation.types import HandCategory


def _percent(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100.0 * count / total


@dataclass
class WinLoseSplit:
    """
    Running win/loss/split tally for one player.

    Every board completion increments exactly one of the three counters.
    """
    wins: int = 0
    losses: int = 0
    splits: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.splits

    @property
    def win_pct(self) -> float:
        return _percent(self.wins, self.total)

    @property
    def loss_pct(self) -> float:
        return _percent(self.losses, self.total)

    @property
    def split_pct(self) -> float:
        return _percent(self.splits, self.total)

    def record(self, won: bool, split: bool = False) -> None:
        """
        Record one completion.

        Args:
            won: Player holds one of the best hands
            split: The best hand is shared with another player
        """
        if not won:
            self.losses += 1
        elif split:
            self.splits += 1
        else:
            self.wins += 1

    def merge(self, other: 'WinLoseSplit') -> 'WinLoseSplit':
        """Return the sum of two tallies."""
        return WinLoseSplit(
            wins=self.wins + other.wins,
            losses=self.losses + other.losses,
            splits=self.splits + other.splits,
        )

    def __str__(self) -> str:
        return f"{self.win_pct:.2f}% - {self.loss_pct:.2f}% - {self.split_pct:.2f}%"


@dataclass
class CategoryHistogram:
    """How often a player finished with each hand category."""
    counts: Counter = field(default_factory=Counter)

    def record(self, category: HandCategory) -> None:
        self.counts[category] += 1

    def count(self, category: HandCategory) -> int:
        return self.counts[category]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def percentage(self, category: HandCategory) -> float:
        return _percent(self.counts[category], self.total)

    def merge(self, other: 'CategoryHistogram') -> 'CategoryHistogram':
        return CategoryHistogram(counts=self.counts + other.counts)

    def __iter__(self) -> Iterator[Tuple[HandCategory, int]]:
        """Categories with a non-zero count, strongest first."""
        for category in sorted(HandCategory, reverse=True):
            if self.counts[category]:
                yield category, self.counts[category]


@dataclass
class EquityResult:
    """
    Outcome of an equity run.

    Attributes:
        tallies: One WinLoseSplit per player, in pocket order
        histograms: One CategoryHistogram per player, in pocket order
        completions: Number of board completions evaluated
    """
    tallies: List[WinLoseSplit]
    histograms: List[CategoryHistogram]
    completions: int = 0

    @classmethod
    def empty(cls, players: int) -> 'EquityResult':
        return cls(
            tallies=[WinLoseSplit() for _ in range(players)],
            histograms=[CategoryHistogram() for _ in range(players)],
        )

    def merge(self, other: 'EquityResult') -> 'EquityResult':
        """
        Combine two partial runs over the same players.

        Raises:
            ValueError: If the runs cover a different number of players
        """
        if len(self.tallies) != len(other.tallies):
            raise ValueError(
                f"Cannot merge results for {len(self.tallies)} and {len(other.tallies)} players"
            )
        return EquityResult(
            tallies=[a.merge(b) for a, b in zip(self.tallies, other.tallies)],
            histograms=[a.merge(b) for a, b in zip(self.histograms, other.histograms)],
            completions=self.completions + other.completions,
        )
