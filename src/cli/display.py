from typing import List, Sequence, Tuple

from poker_equity.core.card import Card, format_cards
from poker_equity.equity.results import EquityResult
from poker_equity.evaluation.hand_description import HandDescriber
from poker_equity.evaluation.types import PokerHand


def display_equity(
    game: str,
    pockets: Sequence[Sequence[Card]],
    board: Sequence[Card],
    result: EquityResult,
    sampled: bool = False
) -> None:
    """Display an equity run in a user-friendly way."""
    print(f"\n=== {game} ===")
    print(f"Board: {format_cards(board) if board else '(none)'}")
    method = "sampled" if sampled else "enumerated"
    print(f"Completions {method}: {result.completions}")

    print("\nWin - Lose - Split:")
    for pocket, tally in zip(pockets, result.tallies):
        print(f"- {format_cards(pocket)} - {tally}")

    print("\nHands made:")
    for pocket, histogram in zip(pockets, result.histograms):
        print(f"  {format_cards(pocket)}:")
        for line in histogram_lines(histogram, result.completions):
            print(f"    {line}")


def histogram_lines(histogram, completions: int) -> List[str]:
    """One line per hand category reached, strongest first."""
    lines = []
    for category, count in histogram:
        share = 100.0 * count / completions if completions else 0.0
        lines.append(f"{category.display_name:<16}{count:>10}  {share:6.2f}%")
    return lines


def display_deal(
    game: str,
    board: Sequence[Card],
    showdown: Sequence[Tuple[Sequence[Card], PokerHand]],
    describer: HandDescriber
) -> None:
    """Display a dealt round with pockets from best to worst hand."""
    print(f"\n=== {game} ===")
    print(f"Board: {format_cards(board)}")
    for pocket, hand in showdown:
        print(
            f"Pocket: {format_cards(pocket)} -> {describer.describe_hand_detailed(hand)}"
            f" ({format_cards(hand.cards)})"
        )
