# File: agenda_layout/processors/day_splitter.py
"""
Multi-day event splitting.
Cuts an event that crosses midnight into one fragment per calendar day so
each day column only ever sees day-local events.
"""

import datetime
from dataclasses import replace
from typing import Iterable, List

from agenda_layout.models import CalendarEvent
from agenda_layout.utils.logger import setup_logger
from agenda_layout.utils.time_utils import (
    END_OF_DAY,
    TimezoneLike,
    end_of_day,
    local_date,
    resolve_timezone,
    start_of_day,
)

logger = setup_logger(__name__)


def _day_bounds(day: datetime.date, zone: datetime.tzinfo, naive: bool):
    """Start and end of ``day``; naive when the source event is naive."""
    if naive:
        return (
            datetime.datetime.combine(day, datetime.time.min),
            datetime.datetime.combine(day, END_OF_DAY),
        )
    return start_of_day(day, zone), end_of_day(day, zone)


def split_multi_day_event(event: CalendarEvent, tz: TimezoneLike = None) -> List[CalendarEvent]:
    """
    Split an event into one fragment per calendar day it touches.

    The first fragment keeps the real start, the last keeps the real end and
    every other boundary is 00:00:00.000 / 23:59:59.999 of that day. All
    other fields (id included) are copied from the source event.

    Args:
        event: Event with start_time <= end_time
        tz: Timezone whose midnights delimit days (default: Config.TIMEZONE)

    Returns:
        ``[event]`` for a same-day event, otherwise the chronological fragments
    """
    zone = resolve_timezone(tz)
    first_day = local_date(event.start_time, zone)
    last_day = local_date(event.end_time, zone)

    if first_day == last_day:
        return [event]

    naive = event.start_time.tzinfo is None
    fragments: List[CalendarEvent] = []
    day = first_day
    while day <= last_day:
        day_start, day_end = _day_bounds(day, zone, naive)
        fragments.append(replace(
            event,
            start_time=event.start_time if day == first_day else day_start,
            end_time=event.end_time if day == last_day else day_end,
        ))
        day += datetime.timedelta(days=1)

    logger.debug(
        f"Split event {event.id} into {len(fragments)} fragments "
        f"({first_day.isoformat()} .. {last_day.isoformat()})"
    )
    return fragments


def split_events(events: Iterable[CalendarEvent], tz: TimezoneLike = None) -> List[CalendarEvent]:
    """Split every event of a feed and flatten the result."""
    zone = resolve_timezone(tz)
    split: List[CalendarEvent] = []
    for event in events:
        split.extend(split_multi_day_event(event, zone))
    return split
