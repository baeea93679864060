"""
Logging utilities for Othello.
"""
import os
import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Sets up console/file logging for a run and records match metrics."""

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
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = getattr(logging, config.logging.log_level.upper(), logging.WARNING)
        formatter = logging.Formatter(FORMAT)

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers = [self.console]

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'othello.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        # Configure root logger
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int = 0, prefix: str = ''):
        """
        Log a dictionary of metrics on one line.

        Args:
            metrics: Dictionary of metrics to log
            step: Game or match number
            prefix: Prefix for metric names (e.g., 'match/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Flush and detach the handlers added by this logger."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
