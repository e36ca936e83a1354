"""Ports - interfaces/protocols for external dependencies."""

from .calendar_source import CalendarSource

__all__ = [
    "CalendarSource",
]
