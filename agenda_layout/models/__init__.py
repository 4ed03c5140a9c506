from .enums import EventSource
from .common import events_overlap, parse_iso_datetime
from .calendar import CalendarEvent, event_from_dict
from .layout import PositionedEvent, OverlapGroup, DayColumn, WeekLayout, WEEKDAY_LABELS

__all__ = [
    "EventSource",
    "parse_iso_datetime",
    "events_overlap",
    "CalendarEvent",
    "event_from_dict",
    "PositionedEvent",
    "OverlapGroup",
    "DayColumn",
    "WeekLayout",
    "WEEKDAY_LABELS",
]
