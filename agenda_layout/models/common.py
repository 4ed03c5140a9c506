# File: agenda_layout/models/common.py

from datetime import datetime
from typing import Optional, Union


def parse_iso_datetime(date_str: Optional[Union[str, datetime]]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not date_str:
        return None
    if isinstance(date_str, datetime):
        return date_str
    try:
        # Python < 3.11 does not accept a trailing 'Z' in fromisoformat
        clean_str = date_str.strip().replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(date_str.strip(), "%Y-%m-%d")
        except ValueError:
            return None


def events_overlap(first, second) -> bool:
    """
    Half-open interval test for anything with ``start_time``/``end_time``.

    Touching ranges (one ends exactly when the other starts) do not overlap.
    """
    return first.start_time < second.end_time and second.start_time < first.end_time
