"""Tests for the hand category builders."""
from poker_equity.core.card import Card, Rank, Suit, parse_cards
from poker_equity.core.wild import is_joker
from poker_equity.evaluation.builders import (
    as_flush, as_full_house, as_high_card, as_quads, as_straight,
    as_straight_flush, find_set, fill_straight, make_sets, partition_wild_cards
)
from poker_equity.evaluation.constants import STRAIGHT_WINDOWS


def split(cards_str):
    return partition_wild_cards(parse_cards(cards_str), is_joker)


def scoring_ranks(cards):
    return [card.scoring_rank for card in cards]


def test_partition_wild_cards():
    naturals, wild_cards = split("Ac ?? Kd ??")
    assert naturals == parse_cards("Ac Kd")
    assert len(wild_cards) == 2

    naturals, wild_cards = partition_wild_cards(parse_cards("Ac ??"), None)
    assert len(naturals) == 2
    assert wild_cards == []


def test_straight_windows():
    assert len(STRAIGHT_WINDOWS) == 10
    assert STRAIGHT_WINDOWS[0] == [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN]
    assert STRAIGHT_WINDOWS[-1] == [Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.LOW_ACE]


def test_find_set_prefers_naturals():
    naturals, wild_cards = split("Kc Kd ?? 7s")
    found = find_set(naturals, wild_cards, 3)
    assert found[:2] == parse_cards("Kc Kd")
    assert found[2].rank == Rank.JOKER
    assert scoring_ranks(found) == [Rank.KING] * 3


def test_find_set_highest_rank_first():
    naturals, wild_cards = split("7c 7d Kc Kd 2s")
    assert scoring_ranks(find_set(naturals, wild_cards, 2)) == [Rank.KING, Rank.KING]
    assert find_set(naturals, wild_cards, 3) is None


def test_make_sets_only_first_set_uses_wilds():
    """Wild cards cannot complete a later set."""
    naturals, wild_cards = split("Ac As ?? Jc Td")
    # Aces take the joker, leaving no natural pair
    assert make_sets(naturals, wild_cards, [3, 2]) is None

    naturals, wild_cards = split("Ac As ?? Jc Jd")
    hand = make_sets(naturals, wild_cards, [3, 2])
    assert scoring_ranks(hand) == [Rank.ACE] * 3 + [Rank.JACK] * 2


def test_make_sets_removes_consumed_cards():
    naturals, wild_cards = split("Kc Kd 5s 5c 3h 3c")
    hand = make_sets(naturals, wild_cards, [2, 2, 1])
    assert hand == parse_cards("Kc Kd 5s 5c 3h")


def test_quads_kicker():
    naturals, wild_cards = split("Ac As Ad Ah Jd 9c")
    hand = as_quads(naturals, wild_cards)
    assert scoring_ranks(hand) == [Rank.ACE] * 4 + [Rank.JACK]


def test_full_house_needs_two_sets():
    naturals, wild_cards = split("Ac As Ad Kh Qd")
    assert as_full_house(naturals, wild_cards) is None


def test_high_card_prefers_naturals():
    naturals, wild_cards = split("Ac Jh 9s 7d 5d 2c")
    assert as_high_card(naturals, wild_cards) == parse_cards("Ac Jh 9s 7d 5d")

    naturals, wild_cards = split("Ac Jh ?? 9s 7d 5d")
    assert as_high_card(naturals, wild_cards) == parse_cards("Ac Jh 9s 7d 5d")


def test_high_card_tops_up_with_wilds():
    naturals, wild_cards = split("Ac Jh 9s 7d ??")
    hand = as_high_card(naturals, wild_cards)
    assert hand == parse_cards("Ac Jh 9s 7d ??")

    naturals, wild_cards = split("Ac Jh 9s ??")
    assert as_high_card(naturals, wild_cards) is None


def test_make_sets_spare_wild_fills_missing_kicker():
    naturals, wild_cards = split("Qs Qh Qd Qc ?? ??")
    hand = make_sets(naturals, wild_cards, [4, 1])
    assert hand[:4] == parse_cards("Qs Qh Qd Qc")
    assert hand[4].rank == Rank.JOKER
    assert hand[4].scoring_rank == Rank.ACE

    # Spare wild cards never complete a later set larger than a kicker
    naturals, wild_cards = split("Qs Qh Qd ?? ??")
    assert make_sets(naturals, wild_cards, [3, 2]) is None


def test_fill_straight_wheel_uses_low_ace():
    naturals, wild_cards = split("Ac 5c 4s 3s 2d")
    hand = fill_straight(naturals, wild_cards, STRAIGHT_WINDOWS[-1])
    assert scoring_ranks(hand) == [Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.LOW_ACE]
    assert hand[-1] == Card(Rank.ACE, Suit.CLUBS)
    assert hand[-1].rank == Rank.ACE


def test_straight_takes_highest_window():
    naturals, wild_cards = split("5c 4s 3s 2d ??")
    hand = as_straight(naturals, wild_cards)
    assert scoring_ranks(hand) == [Rank.SIX, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]

    naturals, wild_cards = split("?? 4s 3s 2d Ac")
    hand = as_straight(naturals, wild_cards)
    assert scoring_ranks(hand) == [Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.LOW_ACE]


def test_flush_wild_takes_highest_missing_rank():
    naturals, wild_cards = split("Ac Kc 7c Tc ??")
    hand = as_flush(naturals, wild_cards)
    assert scoring_ranks(hand) == [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.TEN, Rank.SEVEN]


def test_flush_picks_best_suit():
    naturals, wild_cards = split("2c 3c 4c 6c 8c Ah Kh Qh Jh 9h")
    hand = as_flush(naturals, wild_cards)
    assert all(card.suit == Suit.HEARTS for card in hand)


def test_straight_flush_is_single_suit():
    naturals, wild_cards = split("9c 8c 7c 6d 5c")
    assert as_straight(naturals, wild_cards) is not None
    assert as_straight_flush(naturals, wild_cards) is None

    naturals, wild_cards = split("Ac Kc Qc ?? Jc")
    hand = as_straight_flush(naturals, wild_cards)
    assert scoring_ranks(hand) == [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN]
    assert hand[4].rank == Rank.JOKER
