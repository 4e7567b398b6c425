"""Poker hand classification and board equity package."""

from poker_equity.core.card import Card, Rank, Suit, format_cards, parse_cards
from poker_equity.core.deck import Deck
from poker_equity.core.wild import is_joker, is_one_eyed_jack, is_suicide_king, rank_is_wild
from poker_equity.equity.calculator import EquityCalculator, calculate_equity
from poker_equity.equity.deal import DealtRound, deal_round
from poker_equity.equity.results import CategoryHistogram, EquityResult, WinLoseSplit
from poker_equity.evaluation.evaluator import HandEvaluator, classify, find_winners
from poker_equity.evaluation.types import HandCategory, PokerHand

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "format_cards",
    "parse_cards",
    "Deck",
    "is_joker",
    "is_one_eyed_jack",
    "is_suicide_king",
    "rank_is_wild",
    "EquityCalculator",
    "calculate_equity",
    "DealtRound",
    "deal_round",
    "CategoryHistogram",
    "EquityResult",
    "WinLoseSplit",
    "HandEvaluator",
    "classify",
    "find_winners",
    "HandCategory",
    "PokerHand",
]
