"""Dealing one hold'em round from a shuffled deck."""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from poker_equity.core.card import Card, format_cards
from poker_equity.core.deck import Deck
from poker_equity.evaluation.evaluator import HandEvaluator, evaluator
from poker_equity.evaluation.types import PokerHand

logger = logging.getLogger(__name__)

# Community cards per street: flop, turn, river. One card is burned before each.
STREETS = (3, 1, 1)


@dataclass
class DealtRound:
    """
    Cards dealt for one round.

    Attributes:
        pockets: Hole cards per player, in seat order
        board: The five community cards
        burns: Cards burned before each street
    """
    pockets: List[List[Card]]
    board: List[Card]
    burns: List[Card] = field(default_factory=list)

    def showdown(self, hand_evaluator: HandEvaluator = evaluator) -> List[Tuple[List[Card], PokerHand]]:
        """Each pocket with its best hand on the board, strongest first."""
        ranked = hand_evaluator.rank_hands([pocket + self.board for pocket in self.pockets])
        return [(self.pockets[index], hand) for index, hand in ranked]


def deal_round(deck: Deck, players: int, pocket_cards: int = 2) -> DealtRound:
    """
    Deal pockets one card at a time around the table, then the board.

    Args:
        deck: Deck to deal from, shuffled by the caller
        players: Number of pockets to deal
        pocket_cards: Hole cards per player

    Raises:
        ValueError: If there are no players or the deck is too small
    """
    if players < 1:
        raise ValueError(f"At least one player is required, got {players}")
    needed = players * pocket_cards + sum(STREETS) + len(STREETS)
    if deck.size < needed:
        raise ValueError(f"Dealing {players} players needs {needed} cards, deck has {deck.size}")

    pockets: List[List[Card]] = [[] for _ in range(players)]
    for _ in range(pocket_cards):
        for pocket in pockets:
            pocket.append(deck.deal_card())

    board: List[Card] = []
    burns: List[Card] = []
    for street in STREETS:
        burns.append(deck.deal_card())
        board.extend(deck.deal_cards(street))

    logger.info(f"Dealt {players} pockets, board [{format_cards(board)}]")
    return DealtRound(pockets=pockets, board=board, burns=burns)
