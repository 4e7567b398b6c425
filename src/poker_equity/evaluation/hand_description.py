"""Human-readable descriptions of poker hands."""
from typing import Callable, Optional, Sequence, Union

from poker_equity.core.card import Card, Rank
from poker_equity.evaluation.evaluator import classify
from poker_equity.evaluation.types import HandCategory, PokerHand


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self, is_wild: Optional[Callable[[Card], bool]] = None):
        """Initialize with the wild card rule used for raw card lists."""
        self.is_wild = is_wild

    def _as_hand(self, hand: Union[PokerHand, Sequence[Card]]) -> PokerHand:
        if isinstance(hand, PokerHand):
            return hand
        return classify(hand, self.is_wild)

    def describe_hand(self, hand: Union[PokerHand, Sequence[Card]]) -> str:
        """Get a basic description of the hand, e.g. 'Full House'."""
        hand = self._as_hand(hand)
        if self._is_royal(hand):
            return "Royal Flush"
        return hand.category.display_name

    def describe_hand_detailed(self, hand: Union[PokerHand, Sequence[Card]]) -> str:
        """Get a detailed description of the hand, e.g. 'Full House, Aces over Jacks'."""
        hand = self._as_hand(hand)
        ranks = [card.scoring_rank for card in hand.cards]
        category = hand.category

        if category == HandCategory.STRAIGHT_FLUSH:
            if self._is_royal(hand):
                return "Royal Flush"
            return f"{ranks[0].name_text}-high Straight Flush"
        elif category == HandCategory.QUADS:
            return f"Four {ranks[0].plural_name}"
        elif category == HandCategory.FULL_HOUSE:
            return f"Full House, {ranks[0].plural_name} over {ranks[3].plural_name}"
        elif category == HandCategory.FLUSH:
            return f"{ranks[0].name_text}-high Flush"
        elif category == HandCategory.STRAIGHT:
            return f"{ranks[0].name_text}-high Straight"
        elif category == HandCategory.TRIPLETS:
            return f"Three {ranks[0].plural_name}"
        elif category == HandCategory.TWO_PAIR:
            return f"Two Pair, {ranks[0].plural_name} and {ranks[2].plural_name}"
        elif category == HandCategory.ONE_PAIR:
            return f"Pair of {ranks[0].plural_name}"
        return f"{ranks[0].name_text} High"

    @staticmethod
    def _is_royal(hand: PokerHand) -> bool:
        return (hand.category == HandCategory.STRAIGHT_FLUSH
                and hand.cards[0].scoring_rank == Rank.ACE)
