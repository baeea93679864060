"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

# Maximum search depth in plies. Deeper is stronger but slower: every extra
# ply multiplies the work by roughly the number of legal moves.
DEPTH_MAX = 4

SIDES = {'black': -1, 'white': 1}


@dataclass
class SearchConfig:
    """Configuration for the minimax search."""
    depth: int = DEPTH_MAX
    pruning: bool = True  # Alpha-beta; False searches the full tree
    pass_aware: bool = True  # Keep searching when only the side to move is stuck
    workers: int = 1  # Processes for the root moves

    def validate(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")
        if self.workers < 1:
            raise ValueError(f"Number of workers must be at least 1, got {self.workers}")


@dataclass
class GameConfig:
    """Configuration for an interactive game."""
    human_side: str = 'black'
    show_valid_moves: bool = False

    def validate(self) -> None:
        if self.human_side not in SIDES:
            raise ValueError(f"human_side must be 'black' or 'white', got {self.human_side!r}")

    @property
    def human(self) -> int:
        return SIDES[self.human_side]

    @property
    def computer(self) -> int:
        return -SIDES[self.human_side]


@dataclass
class ArenaConfig:
    """Configuration for engine-vs-engine matches."""
    games: int = 10
    depth_a: int = 3
    depth_b: int = 0  # 0 plays random legal moves
    output_dir: str = "match_results"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: int = 42
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        self.search.validate()
        self.game.validate()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed', 42),
            search=SearchConfig(**config_dict.get('search', {})),
            game=GameConfig(**config_dict.get('game', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        ).validate()

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
