# File: agenda_layout/models/enums.py

from enum import Enum


class EventSource(Enum):
    """Feed an agenda event was fetched from."""
    PERSONAL = "personal"
    CLASS = "class"
