# File: agenda_layout/core/week_layout.py
"""
Week layout pipeline.

Takes the raw personal and class event feeds for the visible week and turns
them into one packed column per day:

    raw records -> CalendarEvent -> split per day -> grouped by date -> packed
"""

import datetime
import json
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from agenda_layout.core.config_manager import Config
from agenda_layout.models import CalendarEvent, DayColumn, EventSource, WeekLayout, event_from_dict
from agenda_layout.processors.day_splitter import split_events
from agenda_layout.processors.overlap_packer import detect_overlaps, group_overlaps
from agenda_layout.utils.logger import LoggerMixin
from agenda_layout.utils.time_utils import (
    fmt_datetime,
    fmt_time,
    hour_grid,
    local_date,
    resolve_timezone,
    shift_week,
    to_local,
    week_days,
)


class WeekLayoutBuilder(LoggerMixin):
    """Builds the positioned week view from event feeds."""

    def __init__(
        self,
        pixels_per_hour: Optional[float] = None,
        timezone: Optional[str] = None
    ):
        """
        Initialize the builder.

        Args:
            pixels_per_hour: Vertical density (default: Config.PIXELS_PER_HOUR)
            timezone: Timezone name for day boundaries (default: Config.TIMEZONE)
        """
        self.pixels_per_hour = pixels_per_hour if pixels_per_hour is not None else Config.PIXELS_PER_HOUR
        if self.pixels_per_hour <= 0:
            raise ValueError(f"pixels_per_hour must be positive, got {self.pixels_per_hour}")
        self.timezone_name = timezone or Config.TIMEZONE
        self.timezone = resolve_timezone(self.timezone_name)

    def merge_sources(
        self,
        personal: Iterable[CalendarEvent],
        class_events: Iterable[CalendarEvent]
    ) -> List[CalendarEvent]:
        """Tag each event with its feed and concatenate, personal first."""
        merged: List[CalendarEvent] = []
        for source, events in ((EventSource.PERSONAL, personal), (EventSource.CLASS, class_events)):
            for event in events:
                if event.payload.get('type') == source.value:
                    merged.append(event)
                else:
                    merged.append(replace(event, payload={**event.payload, 'type': source.value}))
        return merged

    def group_by_day(
        self,
        events: Iterable[CalendarEvent],
        days: Sequence[datetime.date]
    ) -> Dict[datetime.date, List[CalendarEvent]]:
        """
        Bucket day-local events by the date they start on.

        Every requested day is present in the result, possibly empty.
        Events starting on other dates are dropped.
        """
        buckets: Dict[datetime.date, List[CalendarEvent]] = {day: [] for day in days}
        dropped = 0
        for event in events:
            day = local_date(event.start_time, self.timezone)
            if day in buckets:
                buckets[day].append(event)
            else:
                dropped += 1

        if dropped:
            self.logger.debug(f"Dropped {dropped} fragments outside the visible days")
        return buckets

    def build(
        self,
        events: Iterable[CalendarEvent],
        anchor: Union[datetime.date, datetime.datetime]
    ) -> WeekLayout:
        """
        Lay out every event of the week containing ``anchor``.

        Args:
            events: Parsed events; multi-day events are split here
            anchor: Any date of the week to show

        Returns:
            WeekLayout with seven Monday-first columns
        """
        days = week_days(anchor)
        fragments = split_events(events, self.timezone)
        buckets = self.group_by_day(fragments, days)

        columns: List[DayColumn] = []
        for day in days:
            positioned = detect_overlaps(buckets[day], self.pixels_per_hour, self.timezone)
            if positioned:
                widest = max(group.size for group in group_overlaps(positioned))
                self.logger.debug(
                    f"{day.isoformat()}: {len(positioned)} events, widest cluster {widest}"
                )
            columns.append(DayColumn(day=day, events=positioned))

        layout = WeekLayout(
            week_start=days[0],
            previous_week=shift_week(days, -1)[0],
            next_week=shift_week(days, 1)[0],
            days=columns,
            pixels_per_hour=self.pixels_per_hour,
            timezone=self.timezone_name,
            hour_grid=hour_grid(self.pixels_per_hour),
            scroll_offset=Config.DEFAULT_SCROLL_HOUR * self.pixels_per_hour,
        )
        self.logger.info(
            f"Laid out {layout.total_events()} events for week of {days[0].isoformat()}"
        )
        return layout

    def upcoming_events(
        self,
        events: Iterable[CalendarEvent],
        today: Union[datetime.date, datetime.datetime],
        horizon_days: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[CalendarEvent]:
        """
        Events starting 1 to ``horizon_days`` days after today, soonest first.

        Duplicates (same id, e.g. fragments of one multi-day event) are
        collapsed to the first occurrence.
        """
        if horizon_days is None:
            horizon_days = Config.UPCOMING_HORIZON_DAYS
        if limit is None:
            limit = Config.UPCOMING_LIMIT
        if isinstance(today, datetime.datetime):
            today = local_date(today, self.timezone)

        unique: Dict[str, CalendarEvent] = {}
        for event in events:
            unique.setdefault(event.id, event)

        upcoming = []
        for event in unique.values():
            diff_days = (local_date(event.start_time, self.timezone) - today).days
            if 0 < diff_days <= horizon_days:
                upcoming.append(event)

        # feeds may mix naive and aware times
        upcoming.sort(key=lambda e: to_local(e.start_time, self.timezone))
        return upcoming[:limit]

    def build_from_feeds(
        self,
        personal: Iterable[dict],
        class_events: Iterable[dict],
        anchor: Union[datetime.date, datetime.datetime],
        today: Optional[datetime.date] = None
    ) -> WeekLayout:
        """
        Full agenda flow from raw records.

        Raises:
            ValueError: if any record has a missing id or an unparsable time
        """
        personal_events = [event_from_dict(raw, EventSource.PERSONAL) for raw in personal]
        class_list = [event_from_dict(raw, EventSource.CLASS) for raw in class_events]
        self.logger.info(
            f"Parsed {len(personal_events)} personal and {len(class_list)} class events"
        )

        merged = self.merge_sources(personal_events, class_list)
        layout = self.build(merged, anchor)

        if today is None:
            today = datetime.datetime.now(self.timezone).date()
        layout.upcoming = self.upcoming_events(split_events(merged, self.timezone), today)
        layout.upcoming_labels = {event.id: self.describe_when(event) for event in layout.upcoming}
        return layout

    def describe_when(self, event: CalendarEvent) -> str:
        """Display string for an event, e.g. 'Jan 4, 2024, 14:00 - 16:00'."""
        return f"{fmt_datetime(event.start_time, self.timezone)} - {fmt_time(event.end_time, self.timezone)}"

    def save_layout(self, layout: WeekLayout, filepath: Optional[Path] = None) -> bool:
        """
        Save a week layout as JSON.

        Returns:
            True if successful, False otherwise
        """
        filepath = Path(filepath) if filepath is not None else Config.LAYOUT_OUTPUT_FILE
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(layout.to_dict(), f, indent=2, default=str, ensure_ascii=False)
            self.logger.info(f"Layout saved to {filepath}")
            return True
        except OSError as e:
            self.logger.error(f"Could not save layout: {e}", exc_info=True)
            return False
