# File: agenda_layout/processors/overlap_packer.py
"""
Overlap packing for a single day column.

Events are placed vertically by time of day and horizontally in equal
side-by-side slots, one slot per member of the overlap cluster the event
belongs to.
"""

from typing import Dict, List, Optional, Sequence

from agenda_layout.core.config_manager import Config
from agenda_layout.models import CalendarEvent, OverlapGroup, PositionedEvent, events_overlap
from agenda_layout.utils.logger import setup_logger
from agenda_layout.utils.time_utils import (
    TimezoneLike,
    hours_between,
    hours_since_midnight,
    resolve_timezone,
    to_local,
)

logger = setup_logger(__name__)


def _position(event: CalendarEvent, pixels_per_hour: float, zone) -> PositionedEvent:
    # Naive and aware inputs are both brought into the layout zone so they sort together
    start = to_local(event.start_time, zone)
    end = to_local(event.end_time, zone)
    return PositionedEvent(
        id=event.id,
        start_time=start,
        end_time=end,
        top=pixels_per_hour * hours_since_midnight(start, zone),
        height=hours_between(start, end) * pixels_per_hour,
        z_index=Config.BASE_Z_INDEX,
        original_event=event,
    )


def _build_clusters(ordered: List[PositionedEvent]) -> List[List[PositionedEvent]]:
    """
    Single left-to-right sweep over start-sorted events.

    An event joins the open cluster when it overlaps any member of it.
    An instant that falls inside the cluster's span without overlapping a
    member (it sits exactly on a member's start) gets a cluster of its own
    and the open cluster stays open; such singletons are emitted right after
    the cluster they sit in. Otherwise the open cluster is closed and a new
    one starts with the event.
    """
    clusters: List[List[PositionedEvent]] = []
    current: List[PositionedEvent] = []
    isolated: List[List[PositionedEvent]] = []
    current_end = None

    for event in ordered:
        if not current or any(events_overlap(event, member) for member in current):
            current.append(event)
            current_end = event.end_time if current_end is None else max(current_end, event.end_time)
        elif event.start_time < current_end:
            # only a zero-duration event can get here
            isolated.append([event])
        else:
            clusters.append(current)
            clusters.extend(isolated)
            current, isolated = [event], []
            current_end = event.end_time

    if current:
        clusters.append(current)
    clusters.extend(isolated)
    return clusters


def detect_overlaps(
    events: Sequence[CalendarEvent],
    pixels_per_hour: Optional[float] = None,
    tz: TimezoneLike = None
) -> List[PositionedEvent]:
    """
    Lay out the events of one day column.

    Args:
        events: Day-local events, already filtered to a single date
        pixels_per_hour: Vertical density (default: Config.PIXELS_PER_HOUR)
        tz: Timezone the time of day is read in (default: Config.TIMEZONE)

    Returns:
        One PositionedEvent per input event, in start-time order

    Raises:
        ValueError: if pixels_per_hour is not positive
    """
    if pixels_per_hour is None:
        pixels_per_hour = Config.PIXELS_PER_HOUR
    if pixels_per_hour <= 0:
        raise ValueError(f"pixels_per_hour must be positive, got {pixels_per_hour}")

    if not events:
        return []

    zone = resolve_timezone(tz)
    positioned = [_position(event, pixels_per_hour, zone) for event in events]

    # sorted() is stable, so equal starts keep their input order
    positioned = sorted(positioned, key=lambda e: e.start_time)

    clusters = _build_clusters(positioned)
    for group_id, cluster in enumerate(clusters):
        width = 100 / len(cluster)
        for index, event in enumerate(cluster):
            event.overlap_group = group_id
            event.width = width
            event.left = index * width

    logger.debug(f"Packed {len(positioned)} events into {len(clusters)} overlap groups")

    return positioned


def group_overlaps(positioned: Sequence[PositionedEvent]) -> List[OverlapGroup]:
    """Collect packed events back into their overlap groups, in group order."""
    groups: Dict[int, OverlapGroup] = {}
    for event in positioned:
        groups.setdefault(event.overlap_group, OverlapGroup(group_id=event.overlap_group)).events.append(event)
    return [groups[key] for key in sorted(groups)]
