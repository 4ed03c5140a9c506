# File: logger.py
"""
Centralized logging configuration for the agenda layout engine.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


def _resolve_level(level) -> int:
    """Accept either a logging constant or a level name such as 'DEBUG'."""
    if isinstance(level, str):
        value = getattr(logging, level.upper(), None)
        return value if isinstance(value, int) else logging.INFO
    return level


def setup_logger(
    name: str = "agenda_layout",
    level=None,
    log_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Logging level or level name (default: LOG_LEVEL env var, then INFO)
        log_dir: Directory for the dated log file (default: LOGS_DIR env var, then ./logs)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    level = _resolve_level(level if level is not None else os.getenv("LOG_LEVEL", "INFO"))
    if log_dir is None:
        log_dir = os.getenv("LOGS_DIR", "logs")
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler for persistent logs
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"agenda_layout_{datetime.now().strftime('%Y%m%d')}.log"
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
            self._logger = setup_logger(self.__class__.__name__)
        return self._logger
