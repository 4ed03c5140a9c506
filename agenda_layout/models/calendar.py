# File: agenda_layout/models/calendar.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

from .common import events_overlap, parse_iso_datetime
from .enums import EventSource

TIME_KEYS = ('startTime', 'endTime', 'start_time', 'end_time')


@dataclass(frozen=True)
class CalendarEvent:
    """
    An agenda event as consumed by the layout engine.

    Everything besides the id and the two instants lives in ``payload`` and
    is passed through untouched (name, location, color, classId, ...).
    Split fragments of a multi-day event are CalendarEvents too and share
    the id of their source event.
    """
    id: str
    start_time: datetime
    end_time: datetime
    payload: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate event data."""
        if self.end_time < self.start_time:
            raise ValueError(
                f"Event end time must not be before start time: {self.id} "
                f"({self.start_time.isoformat()} > {self.end_time.isoformat()})"
            )

    @property
    def source(self) -> Optional[EventSource]:
        """Feed the event came from, if it was tagged."""
        raw = self.payload.get('type')
        try:
            return EventSource(raw) if raw is not None else None
        except ValueError:
            return None

    def duration_hours(self) -> float:
        """Event duration in (fractional) hours."""
        return (self.end_time - self.start_time).total_seconds() / 3600

    def overlaps_with(self, other: 'CalendarEvent') -> bool:
        """Half-open overlap test; touching events do not overlap."""
        return events_overlap(self, other)

    def to_dict(self) -> dict:
        """Convert back to the flat record shape the data source delivers."""
        return {
            **self.payload,
            'id': self.id,
            'startTime': self.start_time.isoformat(),
            'endTime': self.end_time.isoformat(),
        }


def event_from_dict(
    data: dict,
    source: Optional[Union[EventSource, str]] = None
) -> CalendarEvent:
    """
    Create a CalendarEvent from a raw record.

    Raises:
        ValueError: if the id is missing or a time cannot be parsed
    """
    event_id = data.get('id')
    if event_id is None:
        raise ValueError(f"Event record is missing 'id': {data!r}")

    raw_start = data.get('startTime', data.get('start_time'))
    raw_end = data.get('endTime', data.get('end_time'))

    start_time = parse_iso_datetime(raw_start)
    if start_time is None:
        raise ValueError(f"Event {event_id}: invalid startTime {raw_start!r}")

    end_time = parse_iso_datetime(raw_end)
    if end_time is None:
        raise ValueError(f"Event {event_id}: invalid endTime {raw_end!r}")

    payload = {k: v for k, v in data.items() if k != 'id' and k not in TIME_KEYS}
    if source is not None:
        payload['type'] = EventSource(source).value

    return CalendarEvent(
        id=str(event_id),
        start_time=start_time,
        end_time=end_time,
        payload=payload,
    )
