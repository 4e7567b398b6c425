"""Deck implementation."""
import random
from typing import List, Optional

from .card import Card, Rank, Suit


STANDARD_SUITS = [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES]
STANDARD_RANKS = [r for r in Rank if r not in (Rank.LOW_ACE, Rank.JOKER)]


class Deck:
    """
    Cards not yet seen, used as the source of board completions.

    Attributes:
        cards: List of cards in the deck, the top of the deck last
    """

    def __init__(
        self,
        include_jokers: bool = False,
        jokers: int = 2,
        cards: Optional[List[Card]] = None
    ):
        """
        Build a deck.

        Args:
            include_jokers: Whether to include joker cards
            jokers: How many jokers to add when included
            cards: Exact cards to start from instead of a fresh deck
        """
        self.cards: List[Card] = []
        if cards is not None:
            self.cards.extend(cards)
        else:
            self._initialize_deck(include_jokers, jokers)

    def _initialize_deck(self, include_jokers: bool, jokers: int) -> None:
        """Fill with the 52 standard cards, rank-major, then any jokers."""
        for rank in STANDARD_RANKS:
            for suit in STANDARD_SUITS:
                self.cards.append(Card(rank=rank, suit=suit))

        if include_jokers:
            self.cards.extend(Card.joker() for _ in range(jokers))

    def shuffle(self, times: int = 1, rng: Optional[random.Random] = None) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
            rng: Random source, for reproducible shuffles
        """
        shuffler = rng.shuffle if rng is not None else random.shuffle
        for _ in range(times):
            shuffler(self.cards)

    def deal_card(self) -> Optional[Card]:
        """Deal a single card from the top of the deck, or None if empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.
        Matches only on rank and suit.

        Raises:
            ValueError: If card not in deck
        """
        for index, deck_card in enumerate(self.cards):
            if deck_card == card:
                return self.cards.pop(index)
        raise ValueError(f"Card {card} not in deck")

    def remove_cards(self, cards: List[Card]) -> List[Card]:
        """Remove each of ``cards``, returning the removed deck copies."""
        return [self.remove_card(card) for card in cards]

    def get_cards(self) -> List[Card]:
        """Copy of the cards, in deck order."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
