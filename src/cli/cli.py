import argparse
import logging
import random
import sys
from typing import List, Optional

from poker_equity.config.loader import GameConfig, game_config_loader
from poker_equity.core.card import parse_cards
from poker_equity.equity.deal import DealtRound, deal_round
from poker_equity.evaluation.evaluator import HandEvaluator
from poker_equity.evaluation.hand_description import HandDescriber

from .display import display_deal, display_equity

logger = logging.getLogger(__name__)

DEFAULT_GAME = "hold_em"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker-equity",
        description="Win/lose/split equity for hold'em pockets on a partial board.",
    )
    parser.add_argument(
        "--pocket", "-p", action="append", default=[],
        help="A player's hole cards, e.g. 'Ac Kc'. Repeat once per player.",
    )
    parser.add_argument(
        "--board", "-b", default="",
        help="Known community cards, e.g. '7c 5c 4s'.",
    )
    parser.add_argument(
        "--deal", "-d", type=int, metavar="PLAYERS",
        help="Shuffle and deal a full round to this many players, then show every hand.",
    )
    parser.add_argument(
        "--game", "-g", default=DEFAULT_GAME,
        help=f"Game configuration name from data/game_configs (default: {DEFAULT_GAME}).",
    )
    parser.add_argument(
        "--samples", type=int,
        help="Estimate from this many random completions instead of enumerating all.",
    )
    parser.add_argument("--seed", type=int, help="Seed for --samples and --deal.")
    parser.add_argument(
        "--limit", type=int,
        help="Stop enumerating after this many completions.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log progress to stdout.",
    )
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def get_game(name: str) -> GameConfig:
    """Look up a game configuration, listing the known ones on failure."""
    config = game_config_loader.get_config(name)
    if config is None:
        known = ", ".join(sorted(game_config_loader.get_all_configs()))
        raise ValueError(f"Unknown game '{name}' (available: {known})")
    return config


def deal_game(game: GameConfig, players: int, seed: Optional[int] = None) -> DealtRound:
    """Shuffle a fresh deck for ``game`` and deal one round."""
    deck = game.make_deck()
    deck.shuffle(rng=random.Random(seed))
    return deal_round(deck, players, game.pocket_cards)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.deal is None and not args.pocket:
        parser.error("at least one --pocket is required unless --deal is given")
    if args.deal is not None and (args.pocket or args.board):
        parser.error("--deal cannot be combined with --pocket or --board")
    setup_logging(args.verbose)

    try:
        game = get_game(args.game)
        if args.deal is not None:
            dealt = deal_game(game, args.deal, args.seed)
            is_wild = game.wild_predicate()
            display_deal(
                game.game, dealt.board, dealt.showdown(HandEvaluator(is_wild)), HandDescriber(is_wild)
            )
            return 0

        pockets = [parse_cards(pocket) for pocket in args.pocket]
        board = parse_cards(args.board)
        calculator = game.make_calculator(pockets, board)
        logger.debug(f"Game {args.game}: {calculator.cards_needed} board cards to come")
        if args.samples is not None:
            result = calculator.sample(args.samples, seed=args.seed)
        else:
            result = calculator.run(limit=args.limit)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    display_equity(game.game, pockets, board, result, sampled=args.samples is not None)
    return 0
