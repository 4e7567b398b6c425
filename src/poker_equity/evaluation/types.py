"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Callable, List, Optional, Sequence

from poker_equity.core.card import Card, format_cards
from poker_equity.evaluation.constants import HAND_SIZE, SCORE_BITS


class HandCategory(IntEnum):
    """Poker hand categories, weakest to strongest."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    TRIPLETS = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    QUADS = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.ONE_PAIR: 'Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.TRIPLETS: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.QUADS: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
}


def compute_score(category: HandCategory, cards: Sequence[Card]) -> int:
    """
    Pack a hand into one integer whose ordering is poker hand ordering.

    The category is the most significant digit, followed by the scoring
    rank of each card in assembly order, four bits apiece.
    """
    score = int(category)
    for card in cards:
        score = (score << SCORE_BITS) + card.scoring_rank.value
    return score


@total_ordering
@dataclass(frozen=True, eq=False)
class PokerHand:
    """
    Best five-card hand found in a set of cards.

    Attributes:
        category: Hand category
        cards: The five cards in the order the category builder assembled
            them; wild cards carry the rank they stand in for
        score: Comparison key, see compute_score
    """
    category: HandCategory
    cards: List[Card]
    score: int

    def __post_init__(self) -> None:
        if len(self.cards) != HAND_SIZE:
            raise ValueError(f"A poker hand needs exactly {HAND_SIZE} cards, got {len(self.cards)}")

    @classmethod
    def from_cards(cls, category: HandCategory, cards: Sequence[Card]) -> 'PokerHand':
        """Create a hand from builder output, computing its score."""
        return cls(category=category, cards=list(cards), score=compute_score(category, cards))

    @classmethod
    def build(
        cls,
        cards: Sequence[Card],
        is_wild: Optional[Callable[[Card], bool]] = None
    ) -> 'PokerHand':
        """
        Classify the best five-card hand in ``cards``.

        Args:
            cards: Five to seven cards (pocket plus board)
            is_wild: Wild card predicate, None for no wild cards

        Raises:
            ValueError: If fewer than five cards are given
        """
        # Import here to avoid circular imports
        from poker_equity.evaluation.evaluator import classify
        return classify(cards, is_wild)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PokerHand):
            return NotImplemented
        return self.score == other.score

    def __lt__(self, other: 'PokerHand') -> bool:
        if not isinstance(other, PokerHand):
            return NotImplemented
        return self.score < other.score

    def __hash__(self) -> int:
        return hash(self.score)

    def __str__(self) -> str:
        return f"{format_cards(self.cards)} -> {self.category}"
