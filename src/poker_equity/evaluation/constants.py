"""Constants for poker hand evaluation."""
from poker_equity.core.card import Rank, Suit

# Ranks searched for sets and straights, strongest first.
# LOW_ACE and JOKER are never natural ranks.
NATURAL_RANKS = [
    Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN, Rank.NINE,
    Rank.EIGHT, Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.FOUR, Rank.THREE,
    Rank.TWO,
]

# Suits that can make a flush
FLUSH_SUITS = [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES]

# Slot ranks of every straight, ace-high first, wheel last.
# The wheel's bottom slot is LOW_ACE and is filled by a natural Ace.
STRAIGHT_WINDOWS = [
    [Rank(top - offset) for offset in range(5)]
    for top in range(Rank.ACE.value, Rank.FIVE.value - 1, -1)
]

HAND_SIZE = 5

# Bits per card in a hand score; every scoring rank fits in 0-14
SCORE_BITS = 4
