# File: conflict_engine/utils/logger.py
"""
Centralized logging configuration for the conflict engine.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime

_TRUTHY = ('1', 'true', 'yes', 'on')


def setup_logger(name: str = "conflict_engine", level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    # stderr keeps CLI JSON output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File logging is opt-in; the engine is usually embedded in another app
    if os.getenv("ENGINE_LOG_FILE", "").strip().lower() in _TRUTHY:
        log_dir = Path(os.getenv("ENGINE_LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f"conflict_engine_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


class LoggerMixin:
    """Mixin to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(f"conflict_engine.{self.__class__.__name__}")
        return self._logger
