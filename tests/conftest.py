# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable event data for all tests.
"""

import pytest
from datetime import datetime, timezone
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from agenda_layout.models import CalendarEvent


PIXELS_PER_HOUR = 80


def at(year, month, day, hour=0, minute=0, second=0, microsecond=0):
    """UTC instant shorthand."""
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=timezone.utc)


# ==================== Event Factories ====================

@pytest.fixture
def make_event():
    """Factory for CalendarEvents with a default payload."""
    def _make(event_id, start, end, **payload):
        payload.setdefault('name', f"Event {event_id}")
        return CalendarEvent(id=event_id, start_time=start, end_time=end, payload=payload)
    return _make


@pytest.fixture
def pixels_per_hour():
    return PIXELS_PER_HOUR


# ==================== Single Day Fixtures ====================

@pytest.fixture
def overlapping_pair(make_event):
    """09:00-10:00 and 09:30-10:30 on 2024-01-03."""
    return [
        make_event("A", at(2024, 1, 3, 9), at(2024, 1, 3, 10)),
        make_event("B", at(2024, 1, 3, 9, 30), at(2024, 1, 3, 10, 30)),
    ]


@pytest.fixture
def disjoint_events(make_event):
    """Three events on one day that never touch."""
    return [
        make_event("morning", at(2024, 1, 3, 8), at(2024, 1, 3, 9)),
        make_event("noon", at(2024, 1, 3, 12), at(2024, 1, 3, 13)),
        make_event("evening", at(2024, 1, 3, 18), at(2024, 1, 3, 19, 30)),
    ]


@pytest.fixture
def overnight_event(make_event):
    """2024-01-01 22:00 to 2024-01-02 02:00."""
    return make_event(
        "overnight", at(2024, 1, 1, 22), at(2024, 1, 2, 2),
        location="Lab 3", color="#ff0000", classId="class_1"
    )


# ==================== Raw Feed Fixtures ====================

@pytest.fixture
def personal_feed():
    """Raw personal events as the agenda endpoint returns them."""
    return [
        {
            'id': 'p1',
            'name': 'Study group',
            'startTime': '2024-01-03T09:00:00.000Z',
            'endTime': '2024-01-03T10:00:00.000Z',
            'location': 'Library',
            'color': '#3b82f6',
        },
        {
            'id': 'p2',
            'name': 'Hackathon',
            'startTime': '2024-01-05T20:00:00.000Z',
            'endTime': '2024-01-07T04:00:00.000Z',
            'remarks': 'Bring a laptop',
        },
    ]


@pytest.fixture
def class_feed():
    """Raw class events as the agenda endpoint returns them."""
    return [
        {
            'id': 'c1',
            'name': 'Physics lecture',
            'startTime': '2024-01-03T09:30:00.000Z',
            'endTime': '2024-01-03T11:00:00.000Z',
            'classId': 'physics-101',
            'color': '#22c55e',
        },
        {
            'id': 'c2',
            'name': 'Chemistry lab',
            'startTime': '2024-01-04T14:00:00.000Z',
            'endTime': '2024-01-04T16:00:00.000Z',
            'classId': 'chem-201',
        },
    ]
