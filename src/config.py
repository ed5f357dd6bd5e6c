"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List
import json

HUMAN = "human"
AI = "ai"
CONTROLLER_TYPES = (HUMAN, AI)

MIN_DEPTH = 1
MAX_DEPTH = 15


class InvalidConfigurationError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass
class GameConfig:
    """Configuration for game flow."""
    max_moves: int = 60  # Game ends when the history reaches this many plies


@dataclass
class PlayerConfig:
    """Who controls each seat and how deep the computer searches."""
    black: str = HUMAN  # 1P
    white: str = AI     # 2P
    ai_depth: int = 3


@dataclass
class TournamentConfig:
    """Configuration for agent tournaments."""
    rounds: int = 2
    depths: List[int] = field(default_factory=lambda: [1, 2, 3])
    include_random: bool = True
    seed: int = 42
    k_factor: float = 32.0
    initial_rating: float = 1500.0
    output_dir: str = "tournament_results"
    elo_file: str = "elo_ratings.json"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello-Engine"
    game: GameConfig = field(default_factory=GameConfig)
    players: PlayerConfig = field(default_factory=PlayerConfig)
    tournament: TournamentConfig = field(default_factory=TournamentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def validate(self) -> 'Config':
        """
        Check the values the engine relies on callers to constrain.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidConfigurationError: if a seat type or depth is out of range
        """
        for seat in ('black', 'white'):
            value = getattr(self.players, seat)
            if value not in CONTROLLER_TYPES:
                raise InvalidConfigurationError(
                    f"players.{seat} must be one of {CONTROLLER_TYPES}, got {value!r}")
        check_depth(self.players.ai_depth)
        for depth in self.tournament.depths:
            check_depth(depth)
        if self.game.max_moves < 1:
            raise InvalidConfigurationError("game.max_moves must be positive")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello-Engine'),
            game=GameConfig(**config_dict.get('game', {})),
            players=PlayerConfig(**config_dict.get('players', {})),
            tournament=TournamentConfig(**config_dict.get('tournament', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def check_depth(depth: int) -> int:
    """Raise InvalidConfigurationError unless MIN_DEPTH <= depth <= MAX_DEPTH."""
    if isinstance(depth, bool) or not isinstance(depth, int) or not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise InvalidConfigurationError(
            f"Search depth must be an integer between {MIN_DEPTH} and {MAX_DEPTH}, got {depth!r}")
    return depth


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
