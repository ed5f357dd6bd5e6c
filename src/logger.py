"""
Logging utilities for the Othello engine.
"""
import os
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config


class Logger:
    """Console and file logging for games and tournaments."""

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

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        # Configure root logger
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        self.logger.addHandler(self.console)

        # Set up file logging
        self.file_handler = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            log_file = os.path.join(self.run_dir, 'games.log')
            self.file_handler = logging.FileHandler(log_file)
            self.file_handler.setLevel(level)
            self.file_handler.setFormatter(formatter)
            self.logger.addHandler(self.file_handler)

            # Save config next to the log
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        os.makedirs(self.run_dir, exist_ok=True)
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int):
        """
        Log metrics to the console (and log file, when enabled).

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (game number, round...)
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {name}={value:.4f}"
            else:
                log_str += f" {name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Flush and detach the handlers installed by this logger."""
        for handler in (self.console, self.file_handler):
            if handler is not None and handler in self.logger.handlers:
                self.logger.removeHandler(handler)
                handler.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
