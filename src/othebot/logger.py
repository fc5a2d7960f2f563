"""
Logging utilities for Othebot.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional, Tuple

from .config import Config


class Logger:
    """Configures logging for a terminal session and records game events."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = None
        if not isinstance(config.logging.log_level, str):
            raise ValueError(f"log_level must be a string, got {config.logging.log_level!r}")
        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        if config.logging.verbose:
            level = logging.DEBUG

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.handlers = []

        # Set up console logging
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        # Set up file logging
        if config.logging.log_to_file:
            self.run_dir = os.path.join(self.log_dir, self.run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'othebot.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger = logging.getLogger('othebot')
        self.previous_level = self.logger.level
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.run_dir is not None:
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_move(self, player_name: str, move: str, move_number: int):
        """Record an accepted move."""
        self.logger.info(f"Move {move_number}: {player_name} played {move}")

    def log_scores(self, scores: Tuple[int, int], white_name: str, black_name: str):
        """Record the score, given as (white, black)."""
        white, black = scores
        self.logger.info(f"Score - {black_name}: {black}, {white_name}: {white}")

    def close(self):
        """Detach the handlers installed by this logger and restore its level."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.setLevel(self.previous_level)


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
