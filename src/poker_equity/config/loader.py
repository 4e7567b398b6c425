"""Game configuration loading and parsing."""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from poker_equity.core.card import Card, format_cards
from poker_equity.core.deck import Deck
from poker_equity.core.wild import wild_predicate_from_rules
from poker_equity.equity.calculator import EquityCalculator

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """
    Rules of a hold'em style game that matter for equity.

    Attributes:
        game: Display name
        pocket_cards: Hole cards dealt to each player
        jokers: Jokers added to the 52-card deck
        wild_cards: Wild card rules, see wild_predicate_from_rules
    """
    game: str
    pocket_cards: int = 2
    jokers: int = 0
    wild_cards: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_file(cls, filepath: Path) -> 'GameConfig':
        """Load a GameConfig from a JSON file."""
        with open(filepath, 'r') as f:
            return cls.from_json(f.read())

    @classmethod
    def from_json(cls, json_str: str) -> 'GameConfig':
        """
        Create a GameConfig from a JSON string.

        Raises:
            ValueError: If JSON is invalid or missing required fields
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if 'game' not in data:
            raise ValueError("Missing required field: game")

        pocket_cards = data.get('pocket', {}).get('cards', 2)
        jokers = data.get('deck', {}).get('jokers', 0)
        if not isinstance(pocket_cards, int) or pocket_cards < 1:
            raise ValueError(f"Invalid pocket card count: {pocket_cards}")
        if not isinstance(jokers, int) or jokers < 0:
            raise ValueError(f"Invalid joker count: {jokers}")

        wild_cards = data.get('wildCards', [])
        # Raises on unknown or incomplete rules
        wild_predicate_from_rules(wild_cards)

        return cls(
            game=data['game'],
            pocket_cards=pocket_cards,
            jokers=jokers,
            wild_cards=wild_cards,
        )

    def wild_predicate(self) -> Optional[Callable[[Card], bool]]:
        """Wild card predicate for this game, None when nothing is wild."""
        return wild_predicate_from_rules(self.wild_cards)

    def make_deck(self) -> Deck:
        return Deck(include_jokers=self.jokers > 0, jokers=self.jokers)

    def make_calculator(
        self,
        pockets: Sequence[Sequence[Card]],
        board: Sequence[Card] = ()
    ) -> EquityCalculator:
        """
        Build an equity calculator for this game.

        Raises:
            ValueError: If a pocket has the wrong number of cards
        """
        for pocket in pockets:
            if len(pocket) != self.pocket_cards:
                raise ValueError(
                    f"{self.game} deals {self.pocket_cards} pocket cards, "
                    f"got {format_cards(pocket)}"
                )
        return EquityCalculator(
            pockets, board, is_wild=self.wild_predicate(), deck=self.make_deck()
        )


class GameConfigLoader:
    """Loads and manages game configurations."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing game JSON files.
                       Defaults to data/game_configs from project root.
        """
        if config_dir is None:
            config_dir = Path(__file__).parents[3] / "data" / "game_configs"

        self.config_dir = config_dir
        self._configs: Dict[str, GameConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all game configuration files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading game configurations from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Configuration directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        for json_file in sorted(self.config_dir.glob("*.json")):
            try:
                self._configs[json_file.stem] = GameConfig.from_file(json_file)
                logger.debug(f"Loaded configuration for {json_file.stem}")
            except ValueError as e:
                logger.error(f"Failed to load configuration from {json_file}: {e}")

        logger.info(f"Loaded {len(self._configs)} game configurations")
        self._loaded = True

    def get_config(self, name: str) -> Optional[GameConfig]:
        """
        Get configuration for a game.

        Args:
            name: File stem of the game config, e.g. 'jokers_wild'

        Returns:
            GameConfig if found, None otherwise
        """
        if not self._loaded:
            self.load_all_configs()
        return self._configs.get(name)

    def get_all_configs(self) -> Dict[str, GameConfig]:
        """Get all loaded configurations."""
        if not self._loaded:
            self.load_all_configs()
        return self._configs.copy()


# Global instance
game_config_loader = GameConfigLoader()
