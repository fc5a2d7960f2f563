"""
Configuration parameters for Othebot.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json


@dataclass
class GameConfig:
    """Configuration for a match."""
    white_name: str = "White"
    black_name: str = "Black"
    capture: bool = False  # Flip bounded discs when a move is accepted
    show_legal_moves: bool = True  # List legal moves under the board


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
    project_name: str = "Othebot"
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

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
        """
        Create config from dictionary.

        Raises:
            ValueError: if the config or one of its sections is not a mapping,
                or the log level is not a string
        """
        if not isinstance(config_dict, dict):
            raise ValueError(f"Config must be a JSON object, got {type(config_dict).__name__}")
        for section in ('game', 'logging'):
            if not isinstance(config_dict.get(section, {}), dict):
                raise ValueError(f"Config section '{section}' must be a JSON object")

        logging_config = LoggingConfig(**config_dict.get('logging', {}))
        if not isinstance(logging_config.log_level, str):
            raise ValueError(f"log_level must be a string, got {logging_config.log_level!r}")

        return cls(
            project_name=config_dict.get('project_name', 'Othebot'),
            game=GameConfig(**config_dict.get('game', {})),
            logging=logging_config
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
