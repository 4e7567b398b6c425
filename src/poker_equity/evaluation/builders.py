"""Hand category builders.

Each builder takes the natural cards and the wild cards of one player and
tries to assemble the best five-card hand of its category, returning the
five cards in canonical order or None when the category cannot be made.
Wild cards in the result are copies stamped with the rank they play as.
"""
from typing import Callable, List, Optional, Sequence, Tuple

from poker_equity.core.card import Card, Rank, remove_cards
from poker_equity.evaluation.constants import (
    FLUSH_SUITS, HAND_SIZE, NATURAL_RANKS, STRAIGHT_WINDOWS
)
from poker_equity.evaluation.types import HandCategory, compute_score

Builder = Callable[[Sequence[Card], Sequence[Card]], Optional[List[Card]]]


def partition_wild_cards(
    cards: Sequence[Card],
    is_wild: Optional[Callable[[Card], bool]]
) -> Tuple[List[Card], List[Card]]:
    """Split cards into (naturals, wild_cards) using the wild card predicate."""
    naturals: List[Card] = []
    wild_cards: List[Card] = []
    for card in cards:
        if card.is_wild(is_wild):
            wild_cards.append(card)
        else:
            naturals.append(card)
    return naturals, wild_cards


def _by_scoring_rank(cards: Sequence[Card]) -> List[Card]:
    return sorted(cards, key=lambda card: card.scoring_rank.value, reverse=True)


def find_set(naturals: Sequence[Card], wild_cards: Sequence[Card], size: int) -> Optional[List[Card]]:
    """
    Find the highest ranked set of ``size`` cards.

    Naturals of the rank come first, wild cards fill the remainder and are
    stamped with the rank of the set.
    """
    for rank in NATURAL_RANKS:
        matching = [card for card in naturals if card.rank == rank]
        if len(matching) + len(wild_cards) >= size:
            found = matching[:size]
            needed = size - len(found)
            found.extend(wild.scored_as(rank) for wild in wild_cards[:needed])
            return found
    return None


def make_sets(
    naturals: Sequence[Card],
    wild_cards: Sequence[Card],
    sizes: Sequence[int]
) -> Optional[List[Card]]:
    """
    Satisfy each set size in turn, e.g. [3, 2] for a full house.

    Only the first set may use wild cards; later sets and kickers must be
    made from the natural cards left over. The one exception is a kicker
    with no natural card left to fill it: a wild card the first set did
    not need then plays as an Ace. Natural quads next to wild cards stay
    quads this way.
    """
    hand: List[Card] = []
    pool = list(naturals)
    wilds = list(wild_cards)
    spare: List[Card] = []
    for index, size in enumerate(sizes):
        found = find_set(pool, wilds, size)
        if found is None and size == 1 and spare:
            found = [spare.pop(0).scored_as(Rank.ACE)]
        if found is None:
            return None
        if index == 0:
            # Wild cards are never in the natural pool
            used = sum(1 for card in found if card not in pool)
            spare = wilds[used:]
        hand.extend(found)
        pool = remove_cards(pool, found)
        wilds = []
    return hand


def as_quads(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    return make_sets(naturals, wild_cards, [4, 1])


def as_full_house(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    return make_sets(naturals, wild_cards, [3, 2])


def as_trips(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    return make_sets(naturals, wild_cards, [3, 1, 1])


def as_two_pair(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    return make_sets(naturals, wild_cards, [2, 2, 1])


def as_pair(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    return make_sets(naturals, wild_cards, [2, 1, 1, 1])


def as_high_card(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    """
    Five highest natural cards, topped up with wild cards as dealt.

    Any wild card normally makes at least a pair first, so wild cards only
    reach this builder when nothing else fits. Given five or more cards in
    total it always succeeds, which makes classification total.
    """
    if len(naturals) + len(wild_cards) < HAND_SIZE:
        return None
    return (_by_scoring_rank(naturals) + list(wild_cards))[:HAND_SIZE]


def fill_straight(
    naturals: Sequence[Card],
    wild_cards: Sequence[Card],
    window: Sequence[Rank]
) -> Optional[List[Card]]:
    """
    Fill the slot ranks of one straight, highest slot first.

    A natural card of the slot rank is preferred; otherwise a wild card is
    consumed. The LOW_ACE slot is filled by a natural Ace scored as LOW_ACE.
    """
    hand: List[Card] = []
    wild_index = 0
    for slot_rank in window:
        natural_rank = Rank.ACE if slot_rank == Rank.LOW_ACE else slot_rank
        card = next((c for c in naturals if c.rank == natural_rank), None)
        if card is not None:
            hand.append(card if card.scoring_rank == slot_rank else card.scored_as(slot_rank))
        elif wild_index < len(wild_cards):
            hand.append(wild_cards[wild_index].scored_as(slot_rank))
            wild_index += 1
        else:
            return None
    return hand


def as_straight(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    """Highest straight, trying windows from ace-high down to the wheel."""
    for window in STRAIGHT_WINDOWS:
        hand = fill_straight(naturals, wild_cards, window)
        if hand is not None:
            return hand
    return None


def _fill_flush(suited: Sequence[Card], wild_cards: Sequence[Card]) -> List[Card]:
    """Give each wild card the highest rank missing from the suited cards."""
    present = {card.rank for card in suited}
    missing = [rank for rank in NATURAL_RANKS if rank not in present]
    cards = list(suited)
    cards.extend(wild.scored_as(rank) for wild, rank in zip(wild_cards, missing))
    return _by_scoring_rank(cards)[:HAND_SIZE]


def _best(candidates: List[List[Card]], category: HandCategory) -> Optional[List[Card]]:
    if not candidates:
        return None
    return max(candidates, key=lambda cards: compute_score(category, cards))


def as_flush(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    candidates = []
    for suit in FLUSH_SUITS:
        suited = [card for card in naturals if card.suit == suit]
        if len(suited) + len(wild_cards) >= HAND_SIZE:
            candidates.append(_fill_flush(suited, wild_cards))
    return _best(candidates, HandCategory.FLUSH)


def as_straight_flush(naturals: Sequence[Card], wild_cards: Sequence[Card]) -> Optional[List[Card]]:
    candidates = []
    for suit in FLUSH_SUITS:
        suited = [card for card in naturals if card.suit == suit]
        if len(suited) + len(wild_cards) >= HAND_SIZE:
            straight = as_straight(suited, wild_cards)
            if straight is not None:
                candidates.append(straight)
    return _best(candidates, HandCategory.STRAIGHT_FLUSH)
