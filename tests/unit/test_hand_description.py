"""Tests for the HandDescriber class."""
import pytest
from poker_equity.core.card import parse_cards
from poker_equity.core.wild import is_joker
from poker_equity.evaluation.evaluator import classify
from poker_equity.evaluation.hand_description import HandDescriber


@pytest.fixture
def describer():
    return HandDescriber()


@pytest.mark.parametrize("cards_str,basic,detailed", [
    ("As Ks Qs Js Ts", "Royal Flush", "Royal Flush"),
    ("Kh Qh Jh Th 9h", "Straight Flush", "King-high Straight Flush"),
    ("Ah Ad Ac As Kh", "Four of a Kind", "Four Aces"),
    ("Ah Ac As Kh Kd", "Full House", "Full House, Aces over Kings"),
    ("6h 6c 6s Jh Jd", "Full House", "Full House, Sixes over Jacks"),
    ("Ah Jh 8h 6h 2h", "Flush", "Ace-high Flush"),
    ("Td 9c 8s 7h 6d", "Straight", "Ten-high Straight"),
    ("Ac 5c 4s 3s 2d", "Straight", "Five-high Straight"),
    ("Qh Qc Qs 7h 2d", "Three of a Kind", "Three Queens"),
    ("Jh Jc 4s 4h Ad", "Two Pair", "Two Pair, Jacks and Fours"),
    ("9h 9c As 7h 2d", "Pair", "Pair of Nines"),
    ("Ah Jc 8s 6h 2d", "High Card", "Ace High"),
])
def test_hand_descriptions(describer, cards_str, basic, detailed):
    cards = parse_cards(cards_str)
    assert describer.describe_hand(cards) == basic
    assert describer.describe_hand_detailed(cards) == detailed


def test_wild_card_descriptions():
    """Wild cards are described by the rank they play as."""
    describer = HandDescriber(is_wild=is_joker)
    assert describer.describe_hand_detailed(parse_cards("Ac Kc Qc ?? Jc")) == "Royal Flush"
    assert describer.describe_hand_detailed(parse_cards("Ac As ?? Jc Jd")) == "Full House, Aces over Jacks"
    assert describer.describe_hand_detailed(parse_cards("7c ?? Kd 2s 4h")) == "Pair of Kings"


def test_describe_classified_hand(describer):
    hand = classify(parse_cards("Kc Kd 5s 5c 3h 3c"))
    assert describer.describe_hand(hand) == "Two Pair"
    assert describer.describe_hand_detailed(hand) == "Two Pair, Kings and Fives"
