# File: agenda_layout/core/config_manager.py
"""
Centralized configuration management for the agenda layout engine.
Loads settings from environment variables and an optional .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
import pytz

from agenda_layout.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from agenda_layout/core/

    # Subdirectories
    OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", BASE_DIR / "output"))
    LOGS_DIR = Path(os.getenv("LOGS_DIR", "logs"))

    # Files
    LAYOUT_OUTPUT_FILE = OUTPUT_DIR / "week_layout.json"

    # Day boundaries for splitting and vertical placement
    TIMEZONE = os.getenv("TIMEZONE", "UTC")

    # Grid geometry
    PIXELS_PER_HOUR = _env_float("PIXELS_PER_HOUR", 80.0)
    DEFAULT_SCROLL_HOUR = 8
    HOURS_PER_DAY = 24
    BASE_Z_INDEX = 1

    # Upcoming events panel
    UPCOMING_HORIZON_DAYS = 3
    UPCOMING_LIMIT = 5

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present and sane."""
        errors = []

        if cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown TIMEZONE: {cls.TIMEZONE}")

        if cls.PIXELS_PER_HOUR <= 0:
            errors.append(f"PIXELS_PER_HOUR must be positive, got {cls.PIXELS_PER_HOUR}")

        if cls.UPCOMING_LIMIT < 0 or cls.UPCOMING_HORIZON_DAYS < 0:
            errors.append("Upcoming window settings cannot be negative")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
