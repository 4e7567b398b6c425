"""Card related classes and utilities."""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Iterable, List, Optional


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'
    JOKER = 'j'  # For games with jokers

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """
    Card ranks, valued by their ordinal strength.

    LOW_ACE is the ace playing at the bottom of a 5-4-3-2-A straight and
    JOKER is the placeholder rank carried by joker cards. Neither is ever
    matched as a natural rank during set or straight search.
    """
    ACE = 14
    KING = 13
    QUEEN = 12
    JACK = 11
    TEN = 10
    NINE = 9
    EIGHT = 8
    SEVEN = 7
    SIX = 6
    FIVE = 5
    FOUR = 4
    THREE = 3
    TWO = 2
    LOW_ACE = 1
    JOKER = 0

    @property
    def symbol(self) -> str:
        """Single character used in card notation."""
        return _RANK_SYMBOLS[self]

    @property
    def name_text(self) -> str:
        """Singular English name, e.g. 'Ace'."""
        return _RANK_NAMES[self]

    @property
    def plural_name(self) -> str:
        """Plural English name, e.g. 'Sixes'."""
        if self == Rank.SIX:
            return 'Sixes'
        return f"{self.name_text}s"

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """
        Look up a natural rank by its notation character.

        Raises:
            ValueError: If the symbol is not a natural rank
        """
        rank = _SYMBOL_RANKS.get(symbol.upper())
        if rank is None:
            raise ValueError(f"Invalid rank: {symbol}")
        return rank

    def __str__(self) -> str:
        return self.symbol


_RANK_SYMBOLS = {
    Rank.ACE: 'A', Rank.KING: 'K', Rank.QUEEN: 'Q', Rank.JACK: 'J',
    Rank.TEN: 'T', Rank.NINE: '9', Rank.EIGHT: '8', Rank.SEVEN: '7',
    Rank.SIX: '6', Rank.FIVE: '5', Rank.FOUR: '4', Rank.THREE: '3',
    Rank.TWO: '2', Rank.LOW_ACE: 'A', Rank.JOKER: '?',
}

_RANK_NAMES = {
    Rank.ACE: 'Ace', Rank.KING: 'King', Rank.QUEEN: 'Queen', Rank.JACK: 'Jack',
    Rank.TEN: 'Ten', Rank.NINE: 'Nine', Rank.EIGHT: 'Eight', Rank.SEVEN: 'Seven',
    Rank.SIX: 'Six', Rank.FIVE: 'Five', Rank.FOUR: 'Four', Rank.THREE: 'Three',
    Rank.TWO: 'Two', Rank.LOW_ACE: 'Ace', Rank.JOKER: 'Joker',
}

# LOW_ACE shares the 'A' symbol, so parsing always yields the high ace
_SYMBOL_RANKS = {
    symbol: rank for rank, symbol in _RANK_SYMBOLS.items()
    if rank not in (Rank.LOW_ACE, Rank.JOKER)
}

JOKER_STRINGS = ('??', '*j')


@dataclass(frozen=True, eq=False)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Printed rank (A-2, or JOKER)
        suit: Printed suit (clubs, diamonds, hearts, spades, joker)
        scoring_rank: Rank the card is credited with inside one candidate
            hand. Defaults to ``rank``; differs when the card plays as a
            wild substitute or as the low ace of a wheel.
    """
    rank: Rank
    suit: Suit
    scoring_rank: Optional[Rank] = field(default=None)

    def __post_init__(self) -> None:
        if self.scoring_rank is None:
            object.__setattr__(self, 'scoring_rank', self.rank)

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        if self.rank == Rank.JOKER:
            return '??'
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        if self.scoring_rank != self.rank:
            return f"Card({self}->{self.scoring_rank.symbol})"
        return f"Card({self})"

    def __eq__(self, other: object) -> bool:
        """Cards are equal if rank and suit match, whatever they score as."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def scored_as(self, rank: Rank) -> 'Card':
        """Return this card credited with a different scoring rank."""
        return replace(self, scoring_rank=rank)

    def is_wild(self, predicate: Optional[Callable[['Card'], bool]]) -> bool:
        """Check the card against a wild-card predicate (None means no wilds)."""
        return predicate is not None and predicate(self)

    @classmethod
    def joker(cls) -> 'Card':
        return cls(Rank.JOKER, Suit.JOKER)

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades,
                     or '??' / '*j' for a Joker

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        if card_str.lower() in JOKER_STRINGS:
            return cls.joker()

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = Rank.from_symbol(rank_str)
            suit = Suit(suit_str.lower())
        except ValueError:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        if suit == Suit.JOKER:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse a sequence of cards.

    Accepts space separated ("Ac Kc ??") or concatenated ("AcKc??")
    notation. An empty string gives an empty list.

    Raises:
        ValueError: If the string contains an invalid card
    """
    tokens = cards_str.split()
    if len(tokens) == 1 and len(tokens[0]) > 2:
        packed = tokens[0]
        if len(packed) % 2 != 0:
            raise ValueError(f"Invalid card string length: {cards_str} (must be multiple of 2)")
        tokens = [packed[i:i + 2] for i in range(0, len(packed), 2)]

    cards = []
    for i, token in enumerate(tokens):
        try:
            cards.append(Card.from_string(token))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1} in '{cards_str}': {e}")
    return cards


def format_cards(cards: Iterable[Card]) -> str:
    """Render cards in notation, separated by spaces."""
    return ' '.join(str(card) for card in cards)


def remove_card(cards: Iterable[Card], card: Card) -> List[Card]:
    """Return cards without the first card matching ``card`` by rank and suit."""
    result = []
    found = False
    for candidate in cards:
        if not found and candidate == card:
            found = True
            continue
        result.append(candidate)
    return result


def remove_cards(cards: Iterable[Card], to_remove: Iterable[Card]) -> List[Card]:
    """Return cards with one occurrence of each card in ``to_remove`` taken out."""
    result = list(cards)
    for card in to_remove:
        result = remove_card(result, card)
    return result
