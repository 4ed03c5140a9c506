# File: agenda_layout/utils/time_utils.py
"""
Time helpers shared by the splitter, the packer and the week builder.

All day arithmetic happens in a single layout timezone (Config.TIMEZONE by
default). Naive datetimes are read as wall-clock times in that zone.
"""

import datetime
from typing import List, Optional, Tuple, Union

import pytz

from agenda_layout.core.config_manager import Config
from agenda_layout.models.common import parse_iso_datetime

TimezoneLike = Union[str, datetime.tzinfo, None]
DateTimeLike = Union[str, datetime.datetime]

END_OF_DAY = datetime.time(23, 59, 59, 999000)


def resolve_timezone(tz: TimezoneLike = None) -> datetime.tzinfo:
    """
    Resolve a timezone name (or tzinfo) to a tzinfo object.

    Raises:
        ValueError: if the name is not in the tz database
    """
    if tz is None:
        tz = Config.TIMEZONE
    if isinstance(tz, datetime.tzinfo):
        return tz
    try:
        return pytz.timezone(tz)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone: {tz}")


def _attach(naive: datetime.datetime, tz: datetime.tzinfo) -> datetime.datetime:
    # pytz zones must be attached with localize() to pick the right offset
    if hasattr(tz, 'localize'):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def _as_datetime(value: DateTimeLike) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    parsed = parse_iso_datetime(value)
    if parsed is None:
        raise ValueError(f"Invalid datetime: {value!r}")
    return parsed


def to_local(dt: DateTimeLike, tz: TimezoneLike = None) -> datetime.datetime:
    """Express an instant in the layout timezone."""
    zone = resolve_timezone(tz)
    dt = _as_datetime(dt)
    if dt.tzinfo is None:
        return _attach(dt, zone)
    return dt.astimezone(zone)


def local_date(dt: DateTimeLike, tz: TimezoneLike = None) -> datetime.date:
    """Calendar date of an instant in the layout timezone."""
    return to_local(dt, tz).date()


def start_of_day(day: datetime.date, tz: TimezoneLike = None) -> datetime.datetime:
    """00:00:00.000 of ``day`` in the layout timezone."""
    return _attach(datetime.datetime.combine(day, datetime.time.min), resolve_timezone(tz))


def end_of_day(day: datetime.date, tz: TimezoneLike = None) -> datetime.datetime:
    """23:59:59.999 of ``day`` in the layout timezone."""
    return _attach(datetime.datetime.combine(day, END_OF_DAY), resolve_timezone(tz))


def hours_between(start: DateTimeLike, end: DateTimeLike) -> float:
    """Difference between two instants in hours."""
    diff = _as_datetime(end) - _as_datetime(start)
    return diff.total_seconds() / 3600


def hours_since_midnight(dt: DateTimeLike, tz: TimezoneLike = None) -> float:
    """Wall-clock time of day as fractional hours (09:30 -> 9.5)."""
    local = to_local(dt, tz)
    return (
        local.hour
        + local.minute / 60
        + local.second / 3600
        + local.microsecond / 3_600_000_000
    )


def week_days(anchor: Union[datetime.date, datetime.datetime]) -> List[datetime.date]:
    """The Monday-first week containing ``anchor``."""
    if isinstance(anchor, datetime.datetime):
        anchor = anchor.date()
    monday = anchor - datetime.timedelta(days=anchor.weekday())
    return [monday + datetime.timedelta(days=i) for i in range(7)]


def shift_week(days: List[datetime.date], weeks: int = 1) -> List[datetime.date]:
    """Move a week of dates forward (or back, with a negative count)."""
    return [day + datetime.timedelta(weeks=weeks) for day in days]


def fmt_time(dt: DateTimeLike, tz: TimezoneLike = None) -> str:
    """24h 'HH:MM' in the layout timezone."""
    return to_local(dt, tz).strftime('%H:%M')


def fmt_date(dt: DateTimeLike, tz: TimezoneLike = None) -> str:
    """'Jan 1, 2024' in the layout timezone."""
    local = to_local(dt, tz)
    return f"{local.strftime('%b')} {local.day}, {local.year}"


def fmt_datetime(dt: DateTimeLike, tz: TimezoneLike = None) -> str:
    """'Jan 1, 2024, 09:00' in the layout timezone."""
    return f"{fmt_date(dt, tz)}, {fmt_time(dt, tz)}"


def hour_grid(pixels_per_hour: Optional[float] = None) -> List[Tuple[str, float]]:
    """Row labels and offsets for the 24 hour lines of a day column."""
    if pixels_per_hour is None:
        pixels_per_hour = Config.PIXELS_PER_HOUR
    return [(f"{hour:02d}:00", hour * pixels_per_hour) for hour in range(Config.HOURS_PER_DAY)]
