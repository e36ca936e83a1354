"""Functional core - pure calendar logic with no I/O."""

from .events import ColorKey, ColorStyle, Event, Participant, PALETTE, overlaps
from .window import Direction, ViewMode, Window, advance, resolve_window
from .selection import (
    select_by_participants,
    select_events,
    select_in_window,
    sort_for_list,
    toggle_participant,
)
from .stats import ParticipantStats, aggregate_participant_stats
from .layout import HOUR_HEIGHT, EventBox, LayoutMode, layout_day

__all__ = [
    # Events
    "ColorKey",
    "ColorStyle",
    "Event",
    "Participant",
    "PALETTE",
    "overlaps",
    # Windows
    "Direction",
    "ViewMode",
    "Window",
    "advance",
    "resolve_window",
    # Selection
    "select_by_participants",
    "select_events",
    "select_in_window",
    "sort_for_list",
    "toggle_participant",
    # Stats
    "ParticipantStats",
    "aggregate_participant_stats",
    # Layout
    "HOUR_HEIGHT",
    "EventBox",
    "LayoutMode",
    "layout_day",
]
