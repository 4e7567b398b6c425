"""Main poker hand evaluation interface."""
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from poker_equity.core.card import Card, format_cards
from poker_equity.evaluation.builders import (
    Builder, as_flush, as_full_house, as_high_card, as_pair, as_quads,
    as_straight, as_straight_flush, as_trips, as_two_pair, partition_wild_cards
)
from poker_equity.evaluation.constants import HAND_SIZE
from poker_equity.evaluation.types import HandCategory, PokerHand

logger = logging.getLogger(__name__)

# Builders in strictly descending hand strength. The classifier returns the
# first category that can be made, so this order must never change.
STRENGTH_ORDER: Tuple[Tuple[HandCategory, Builder], ...] = (
    (HandCategory.STRAIGHT_FLUSH, as_straight_flush),
    (HandCategory.QUADS, as_quads),
    (HandCategory.FULL_HOUSE, as_full_house),
    (HandCategory.FLUSH, as_flush),
    (HandCategory.STRAIGHT, as_straight),
    (HandCategory.TRIPLETS, as_trips),
    (HandCategory.TWO_PAIR, as_two_pair),
    (HandCategory.ONE_PAIR, as_pair),
    (HandCategory.HIGH_CARD, as_high_card),
)


def classify(
    cards: Sequence[Card],
    is_wild: Optional[Callable[[Card], bool]] = None
) -> PokerHand:
    """
    Find the best five-card hand in ``cards``.

    Args:
        cards: Five or more cards (pocket plus board)
        is_wild: Wild card predicate, None for no wild cards

    Returns:
        PokerHand of the strongest category that can be built

    Raises:
        ValueError: If fewer than five cards are given
    """
    naturals, wild_cards = partition_wild_cards(cards, is_wild)
    return classify_partitioned(naturals, wild_cards)


def classify_partitioned(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> PokerHand:
    """
    Classify cards already split by partition_wild_cards.

    Lets callers that evaluate many boards against the same pocket split
    the known cards once.

    Raises:
        ValueError: If fewer than five cards are given in total
    """
    if len(naturals) + len(wild_cards) < HAND_SIZE:
        raise ValueError(
            f"Need at least {HAND_SIZE} cards to make a hand, "
            f"got {len(naturals) + len(wild_cards)}"
        )
    if not naturals:
        logger.warning(f"Every card is wild: {format_cards(wild_cards)}")

    for category, builder in STRENGTH_ORDER:
        hand_cards = builder(naturals, wild_cards)
        if hand_cards is not None:
            return PokerHand.from_cards(category, hand_cards)

    # as_high_card accepts any five cards
    raise ValueError(f"No five-card hand can be made from: {format_cards([*naturals, *wild_cards])}")


def find_winners(hands: Sequence[PokerHand]) -> List[int]:
    """
    Indices of the best hands, in one pass over a running best score.

    Returns:
        One index for an outright winner, several for a split
    """
    winners: List[int] = []
    best_score = None
    for index, hand in enumerate(hands):
        if best_score is None or hand.score > best_score:
            best_score = hand.score
            winners = [index]
        elif hand.score == best_score:
            winners.append(index)
    return winners


class HandEvaluator:
    """
    Evaluates hands under one wild card rule.

    Attributes:
        is_wild: Wild card predicate, None for a game without wild cards
    """

    def __init__(self, is_wild: Optional[Callable[[Card], bool]] = None):
        self.is_wild = is_wild

    def evaluate_hand(self, cards: Sequence[Card]) -> PokerHand:
        """Classify the best five-card hand in ``cards``."""
        hand = classify(cards, self.is_wild)
        logger.debug(f"Evaluated {format_cards(cards)}: {hand}")
        return hand

    def rank_hands(self, card_sets: Sequence[Sequence[Card]]) -> List[Tuple[int, PokerHand]]:
        """
        Evaluate several card sets, strongest first.

        Returns:
            (index into card_sets, hand) pairs; tied hands keep their input order
        """
        hands = [(index, self.evaluate_hand(cards)) for index, cards in enumerate(card_sets)]
        return sorted(hands, key=lambda pair: pair[1].score, reverse=True)


# Global instance
evaluator = HandEvaluator()
