"""Adapters - I/O implementations of ports."""

from .json_store import CalendarDataError, JsonCalendarStore
from .demo_seed import DemoCalendarSource

__all__ = [
    "CalendarDataError",
    "JsonCalendarStore",
    "DemoCalendarSource",
]
