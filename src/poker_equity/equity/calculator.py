"""Equity calculation by enumerating board completions."""
import itertools
import logging
import random
import time
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from poker_equity.core.card import Card, format_cards
from poker_equity.core.deck import Deck
from poker_equity.equity.results import EquityResult
from poker_equity.evaluation.builders import partition_wild_cards
from poker_equity.evaluation.evaluator import classify_partitioned, find_winners

logger = logging.getLogger(__name__)

BOARD_SIZE = 5


class EquityCalculator:
    """
    Win/loss/split equity for a set of pockets on a partial board.

    Attributes:
        pockets: Each player's hole cards
        board: Known community cards (0-5)
        is_wild: Wild card predicate, None for no wild cards
    """

    def __init__(
        self,
        pockets: Sequence[Sequence[Card]],
        board: Sequence[Card] = (),
        is_wild: Optional[Callable[[Card], bool]] = None,
        include_jokers: bool = False,
        deck: Optional[Deck] = None
    ):
        """
        Initialize the calculator.

        Args:
            pockets: Hole cards per player
            board: Known community cards
            is_wild: Wild card predicate
            include_jokers: Build the remaining deck from a deck with jokers
            deck: Full deck to draw completions from, instead of a fresh one

        Raises:
            ValueError: If there are no pockets or the board is too long
        """
        if not pockets:
            raise ValueError("At least one pocket is required")
        if len(board) > BOARD_SIZE:
            raise ValueError(f"A board has at most {BOARD_SIZE} cards, got {len(board)}")

        self.pockets: List[List[Card]] = [list(pocket) for pocket in pockets]
        self.board: List[Card] = list(board)
        self.is_wild = is_wild
        self._deck = deck if deck is not None else Deck(include_jokers=include_jokers)

    @property
    def cards_needed(self) -> int:
        """Number of community cards still to come."""
        return BOARD_SIZE - len(self.board)

    def remaining_deck(self) -> List[Card]:
        """
        The deck with every pocket and board card removed.

        Raises:
            ValueError: If a known card is not in the deck (or is dealt twice),
                or too few cards remain to complete the board
        """
        deck = Deck(cards=self._deck.get_cards())
        for pocket in self.pockets:
            deck.remove_cards(pocket)
        deck.remove_cards(self.board)

        if deck.size < self.cards_needed:
            raise ValueError(
                f"Only {deck.size} cards remain, {self.cards_needed} needed to complete the board"
            )
        return deck.get_cards()

    def completions(self) -> Iterator[Tuple[Card, ...]]:
        """Every combination of remaining cards that completes the board."""
        return itertools.combinations(self.remaining_deck(), self.cards_needed)

    def run(self, limit: Optional[int] = None) -> EquityResult:
        """
        Evaluate every completion of the board.

        Args:
            limit: Stop after this many completions

        Returns:
            EquityResult with one tally and histogram per player
        """
        completions: Iterable[Tuple[Card, ...]] = self.completions()
        if limit is not None:
            completions = itertools.islice(completions, limit)

        logger.info(
            f"Enumerating completions of [{format_cards(self.board)}] "
            f"for {len(self.pockets)} players"
        )
        return self._tally(completions)

    def sample(self, iterations: int, seed: Optional[int] = None) -> EquityResult:
        """
        Estimate equity from randomly drawn completions.

        Args:
            iterations: Number of completions to draw
            seed: Seed for a reproducible run

        Raises:
            ValueError: If iterations is not positive
        """
        if iterations <= 0:
            raise ValueError(f"Iterations must be positive, got {iterations}")

        remaining = self.remaining_deck()
        rng = random.Random(seed)
        needed = self.cards_needed
        logger.info(f"Sampling {iterations} completions of [{format_cards(self.board)}] (seed={seed})")
        return self._tally(tuple(rng.sample(remaining, needed)) for _ in range(iterations))

    def _tally(self, completions: Iterable[Tuple[Card, ...]]) -> EquityResult:
        result = EquityResult.empty(len(self.pockets))
        # Known cards are split once; each completion only appends its own cards
        known = [partition_wild_cards(pocket + self.board, self.is_wild) for pocket in self.pockets]
        naturals_bufs = [list(naturals) for naturals, _ in known]
        wild_bufs = [list(wild_cards) for _, wild_cards in known]
        known_sizes = [(len(naturals), len(wild_cards)) for naturals, wild_cards in known]
        started = time.perf_counter()

        for completion in completions:
            new_naturals, new_wilds = partition_wild_cards(completion, self.is_wild)
            hands = []
            for naturals, wild_cards, (natural_count, wild_count) in zip(naturals_bufs, wild_bufs, known_sizes):
                del naturals[natural_count:]
                naturals.extend(new_naturals)
                del wild_cards[wild_count:]
                wild_cards.extend(new_wilds)
                hands.append(classify_partitioned(naturals, wild_cards))

            winners = find_winners(hands)
            split = len(winners) > 1
            for index, hand in enumerate(hands):
                result.tallies[index].record(index in winners, split)
                result.histograms[index].record(hand.category)
            result.completions += 1

        logger.info(
            f"Evaluated {result.completions} completions in {time.perf_counter() - started:.2f}s"
        )
        return result


def calculate_equity(
    pockets: Sequence[Sequence[Card]],
    board: Sequence[Card] = (),
    is_wild: Optional[Callable[[Card], bool]] = None,
    include_jokers: bool = False
) -> EquityResult:
    """Exhaustive equity for ``pockets`` on ``board``."""
    return EquityCalculator(pockets, board, is_wild=is_wild, include_jokers=include_jokers).run()
