"""Event filtering and ordering - pure functions, no I/O."""

from collections.abc import Iterable
from datetime import date

from .events import Event
from .window import Window


def select_by_participants(events: list[Event], active_ids: Iterable[str]) -> list[Event]:
    """
    Keep events belonging to at least one active participant.

    Events with no participant never pass.
    """
    active = set(active_ids)
    return [e for e in events if any(pid in active for pid in e.attributed_ids)]


def in_window(event: Event, window: Window) -> bool:
    """Inclusive membership: events touching a window boundary are inside."""
    return event.start <= window.end and event.end >= window.start


def select_in_window(events: list[Event], window: Window) -> list[Event]:
    """Keep events that intersect the window, boundaries included."""
    return [e for e in events if in_window(e, window)]


def select_events(
    events: list[Event],
    active_ids: Iterable[str] | None = None,
    window: Window | None = None,
) -> list[Event]:
    """
    Apply the participant filter and/or the window filter.

    Pure function - no I/O. Omitted filters are skipped; input order is kept.
    """
    selected = list(events)
    if active_ids is not None:
        selected = select_by_participants(selected, active_ids)
    if window is not None:
        selected = select_in_window(selected, window)
    return selected


def events_on_day(events: list[Event], day: date) -> list[Event]:
    """Events starting on the given calendar day."""
    return [e for e in events if e.start.date() == day]


def index_by_day(events: list[Event]) -> dict[date, list[Event]]:
    """Group events by start date, keeping input order within a day."""
    index: dict[date, list[Event]] = {}
    for e in events:
        index.setdefault(e.start.date(), []).append(e)
    return index


def sort_for_list(events: list[Event]) -> list[Event]:
    """All-day events first, then by start time."""
    return sorted(events, key=lambda e: (not e.is_all_day, e.start, e.id))


def toggle_participant(active_ids: Iterable[str], participant_id: str) -> frozenset[str]:
    """Add the id to the active filter, or remove it if already present."""
    active = set(active_ids)
    if participant_id in active:
        active.discard(participant_id)
    else:
        active.add(participant_id)
    return frozenset(active)
