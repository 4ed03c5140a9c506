"""
Week layout entry point.
Reads an agenda event dump and writes the positioned week view as JSON.

Usage:
    python scripts/layout_week.py --input events.json --week 2024-01-01
"""

import argparse
import datetime
import json
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from agenda_layout.core.config_manager import Config
from agenda_layout.core.week_layout import WeekLayoutBuilder
from agenda_layout.utils.logger import setup_logger
from agenda_layout.utils.time_utils import shift_week

logger = setup_logger(__name__, level=Config.LOG_LEVEL, log_dir=Config.LOGS_DIR)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lay out one week of agenda events.")
    parser.add_argument("--input", required=True, type=Path,
                        help="JSON file: a list of events or {'personal': [...], 'class': [...]}")
    parser.add_argument("--week", type=datetime.date.fromisoformat, default=None,
                        help="Any date of the week to lay out (default: today)")
    parser.add_argument("--shift-weeks", type=int, default=0,
                        help="Move the shown week forward (or back, if negative) by this many weeks")
    parser.add_argument("--today", type=datetime.date.fromisoformat, default=None,
                        help="Reference date for the upcoming events list (default: today)")
    parser.add_argument("--output", type=Path, default=Config.LAYOUT_OUTPUT_FILE,
                        help="Where to write the layout JSON")
    parser.add_argument("--pixels-per-hour", type=float, default=None)
    parser.add_argument("--timezone", default=None)
    return parser.parse_args(argv)


def load_feeds(path: Path) -> Tuple[list, list]:
    """Read the event dump and return (personal, class) record lists."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, list):
        return data, []
    if isinstance(data, dict):
        return data.get('personal', []), data.get('class', [])
    raise ValueError(f"Unsupported event file layout in {path}: {type(data).__name__}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()
    args = parse_args(argv)

    try:
        if not Config.validate():
            logger.error("Configuration validation failed")
            return 1

        builder = WeekLayoutBuilder(
            pixels_per_hour=args.pixels_per_hour,
            timezone=args.timezone
        )
        today = args.today or datetime.date.today()
        personal, class_events = load_feeds(args.input)

        layout = builder.build_from_feeds(
            personal,
            class_events,
            anchor=shift_week([args.week or today], args.shift_weeks)[0],
            today=today
        )

        if not builder.save_layout(layout, args.output):
            return 1

        logger.info(f"Week of {layout.week_start.isoformat()}: {layout.total_events()} positioned events")
        for event in layout.upcoming:
            logger.info(f"Upcoming: {event.payload.get('name', event.id)} ({layout.upcoming_labels[event.id]})")
        return 0

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid event data: {e}", exc_info=True)
        return 1

    except KeyboardInterrupt:
        logger.warning("Layout interrupted by user")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
