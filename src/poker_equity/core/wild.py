"""Wild card predicates.

A wild card predicate is any callable taking a Card and returning True when
that card may stand in for any rank. ``None`` is used throughout the
package to mean a game without wild cards.
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .card import Card, Rank, Suit

logger = logging.getLogger(__name__)

WildPredicate = Callable[[Card], bool]


def is_joker(card: Card) -> bool:
    """Jokers are wild."""
    return card.rank == Rank.JOKER


def is_one_eyed_jack(card: Card) -> bool:
    """The jack of hearts and jack of spades are drawn in profile."""
    return card.rank == Rank.JACK and card.suit in (Suit.HEARTS, Suit.SPADES)


def is_suicide_king(card: Card) -> bool:
    """The king of hearts."""
    return card.rank == Rank.KING and card.suit == Suit.HEARTS


def rank_is_wild(rank: Rank) -> WildPredicate:
    """Make every card of ``rank`` wild (e.g. deuces wild)."""
    def predicate(card: Card) -> bool:
        return card.rank == rank
    predicate.__name__ = f"{rank.name.lower()}_wild"
    return predicate


def card_is_wild(wild_card: Card) -> WildPredicate:
    """Make one specific card wild."""
    def predicate(card: Card) -> bool:
        return card == wild_card
    predicate.__name__ = f"{wild_card}_wild"
    return predicate


def any_wild(*predicates: WildPredicate) -> WildPredicate:
    """Combine predicates; a card is wild if any of them says so."""
    def predicate(card: Card) -> bool:
        return any(p(card) for p in predicates)
    return predicate


def wild_predicate_from_rules(rules: Optional[Iterable[Dict[str, Any]]]) -> Optional[WildPredicate]:
    """
    Build a wild card predicate from configuration rules.

    Supported rule types:
        {"type": "joker"}
        {"type": "rank", "rank": "2"}
        {"type": "card", "card": "Kh"}
        {"type": "one_eyed_jacks"}
        {"type": "suicide_king"}

    Args:
        rules: Rule dictionaries, as found under "wildCards" in a game config

    Returns:
        Predicate, or None when no rules are given

    Raises:
        ValueError: If a rule type is unknown or incomplete
    """
    predicates: List[WildPredicate] = []
    for rule in rules or []:
        rule_type = rule.get("type")
        if rule_type == "joker":
            predicates.append(is_joker)
        elif rule_type == "rank":
            if "rank" not in rule:
                raise ValueError(f"Wild card rule missing 'rank': {rule}")
            predicates.append(rank_is_wild(Rank.from_symbol(rule["rank"])))
        elif rule_type == "card":
            if "card" not in rule:
                raise ValueError(f"Wild card rule missing 'card': {rule}")
            predicates.append(card_is_wild(Card.from_string(rule["card"])))
        elif rule_type == "one_eyed_jacks":
            predicates.append(is_one_eyed_jack)
        elif rule_type == "suicide_king":
            predicates.append(is_suicide_king)
        else:
            raise ValueError(f"Unknown wild card rule type: {rule_type}")

    if not predicates:
        return None
    if len(predicates) == 1:
        return predicates[0]
    logger.debug(f"Combining {len(predicates)} wild card rules")
    return any_wild(*predicates)
