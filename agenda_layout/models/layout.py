# File: agenda_layout/models/layout.py
"""
Layout output models: positioned events, overlap groups and week columns.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from .calendar import CalendarEvent
from .common import events_overlap

WEEKDAY_LABELS = ['MON', 'TUE', 'WED', 'THU', 'FRI', 'SAT', 'SUN']


@dataclass
class PositionedEvent:
    """
    A day-local event annotated with its box in the day column.

    ``top``/``height`` are pixels, ``left``/``width`` are percentages of the
    column width.
    """
    id: str
    start_time: datetime
    end_time: datetime
    top: float
    height: float
    original_event: CalendarEvent
    width: float = 0.0
    left: float = 0.0
    z_index: int = 1
    overlap_group: int = 0

    @property
    def right(self) -> float:
        return self.left + self.width

    def overlaps_with(self, other: 'PositionedEvent') -> bool:
        """Check if the time ranges of two placed events overlap."""
        return events_overlap(self, other)

    def to_dict(self) -> dict:
        """Convert to dictionary for the rendering layer."""
        return {
            'id': self.id,
            'startTime': self.start_time.isoformat(),
            'endTime': self.end_time.isoformat(),
            'top': self.top,
            'height': self.height,
            'width': self.width,
            'left': self.left,
            'zIndex': self.z_index,
            'overlapGroup': self.overlap_group,
            'originalEvent': self.original_event.to_dict(),
        }


@dataclass
class OverlapGroup:
    """A cluster of events that share the column side by side."""
    group_id: int
    events: List[PositionedEvent] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.events)


@dataclass
class DayColumn:
    """Positioned events for one calendar date of the week view."""
    day: date
    events: List[PositionedEvent] = field(default_factory=list)

    @property
    def label(self) -> str:
        return WEEKDAY_LABELS[self.day.weekday()]

    def is_empty(self) -> bool:
        return not self.events

    def to_dict(self) -> dict:
        return {
            'date': self.day.isoformat(),
            'label': self.label,
            'events': [e.to_dict() for e in self.events],
        }


@dataclass
class WeekLayout:
    """Complete layout for one visible week."""
    week_start: date
    days: List[DayColumn]
    pixels_per_hour: float
    timezone: str
    hour_grid: List[Tuple[str, float]] = field(default_factory=list)
    upcoming: List[CalendarEvent] = field(default_factory=list)
    upcoming_labels: Dict[str, str] = field(default_factory=dict)
    scroll_offset: float = 0.0
    previous_week: Optional[date] = None
    next_week: Optional[date] = None

    def get_day(self, day: date) -> Optional[DayColumn]:
        """Get the column for a specific date, if it is in this week."""
        for column in self.days:
            if column.day == day:
                return column
        return None

    def total_events(self) -> int:
        return sum(len(column.events) for column in self.days)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'week_start': self.week_start.isoformat(),
            'previous_week': self.previous_week.isoformat() if self.previous_week else None,
            'next_week': self.next_week.isoformat() if self.next_week else None,
            'timezone': self.timezone,
            'pixels_per_hour': self.pixels_per_hour,
            'scroll_offset': self.scroll_offset,
            'hour_grid': [{'label': label, 'top': top} for label, top in self.hour_grid],
            'days': [column.to_dict() for column in self.days],
            'upcoming': [
                {**e.to_dict(), 'when': self.upcoming_labels.get(e.id)} for e in self.upcoming
            ],
            'total_events': self.total_events(),
        }
