"""View models for the day, week, month and schedule views.

Pure functions - no I/O. Each builder takes the already participant-filtered
event list and returns plain dataclasses for a renderer.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from .events import DEFAULT_COLOR, ColorStyle, Event, Participant
from .layout import HOUR_HEIGHT, EventBox, LayoutMode, layout_day
from .selection import events_on_day, index_by_day, sort_for_list
from .window import ViewMode, resolve_window, week_start

SCROLL_TO_HOUR = 13
MONTH_GRID_CELLS = 42


@dataclass
class EventFill:
    """Background for an event: a palette entry, or a striped gradient."""

    style: ColorStyle
    gradient: str | None = None

    @property
    def is_striped(self) -> bool:
        return self.gradient is not None


@dataclass
class DayAgenda:
    date: date
    items: list[Event]


@dataclass
class ScheduleDay:
    date: date
    all_day: list[Event]
    boxes: list[EventBox]
    scroll_top: float


@dataclass
class DayColumn:
    date: date
    is_today: bool
    events: list[Event]


@dataclass
class WeekStrip:
    days: list[DayColumn]
    next_week_label: str


@dataclass
class MonthCell:
    date: date
    in_month: bool
    is_today: bool
    holidays: list[Event] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    overflow: int = 0


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def _clock(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def format_time_range(event: Event) -> str:
    """Format the event time for display."""
    if event.is_all_day:
        return "All Day"
    return f"{_clock(event.start)} - {_clock(event.end)}"


def hour_label(hour: int) -> str:
    """Label for a row of the hour gutter (0-23)."""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def event_participants(event: Event, participants: list[Participant]) -> list[Participant]:
    """Participants attributed to an event, in attribution order; unknown ids skipped."""
    by_id = {p.id: p for p in participants}
    return [by_id[pid] for pid in event.attributed_ids if pid in by_id]


def event_fill(event: Event, participants: list[Participant]) -> EventFill:
    """
    Pick the background for an event.

    Joint events get a 135deg gradient with one equal hard-edged band per
    participant. Everything else is a solid fill from the primary
    participant's colour, or the default colour when there is none.
    """
    by_id = {p.id: p for p in participants}

    if event.is_joint:
        colors = [
            by_id[pid].color.style.hex if pid in by_id else DEFAULT_COLOR.style.hex
            for pid in event.participant_ids
        ]
        step = 100 / len(colors)
        stops = ", ".join(
            f"{color} {i * step:g}%, {color} {(i + 1) * step:g}%" for i, color in enumerate(colors)
        )
        return EventFill(style=DEFAULT_COLOR.style, gradient=f"linear-gradient(135deg, {stops})")

    primary = event.attributed_ids[0] if event.attributed_ids else None
    participant = by_id.get(primary) if primary else None
    color = participant.color if participant else DEFAULT_COLOR
    return EventFill(style=color.style)


def build_day(anchor: date | datetime, events: list[Event]) -> DayAgenda:
    """Agenda list for one day: all-day events first, then by start."""
    day = _as_date(anchor)
    return DayAgenda(date=day, items=sort_for_list(events_on_day(events, day)))


def build_schedule(
    anchor: date | datetime,
    events: list[Event],
    hour_height: float = HOUR_HEIGHT,
    mode: LayoutMode | str = LayoutMode.PER_EVENT,
) -> ScheduleDay:
    """Hour timeline for one day with an all-day row on top."""
    day = _as_date(anchor)
    all_day = [e for e in events_on_day(events, day) if e.is_all_day]
    return ScheduleDay(
        date=day,
        all_day=all_day,
        boxes=layout_day(events, day, hour_height=hour_height, mode=mode),
        scroll_top=SCROLL_TO_HOUR * hour_height,
    )


def _short_date(d: date) -> str:
    return f"{d.strftime('%b')} {d.day}"


def next_week_label(first: date) -> str:
    """Range label for the week starting on first, e.g. 'Dec 7 - 13'."""
    last = first + timedelta(days=6)
    if first.month != last.month:
        return f"{_short_date(first)} - {_short_date(last)}"
    return f"{_short_date(first)} - {last.day}"


def build_week(
    anchor: date | datetime,
    events: list[Event],
    today: date | datetime,
) -> WeekStrip:
    """Seven Sunday-first day columns plus a label for the following week."""
    window = resolve_window(anchor, ViewMode.WEEK)
    by_day = index_by_day(events)
    current = _as_date(today)
    days = [
        DayColumn(date=d, is_today=d == current, events=sort_for_list(by_day.get(d, [])))
        for d in window.days()
    ]
    return WeekStrip(days=days, next_week_label=next_week_label(window.last_day + timedelta(days=1)))


def build_month(
    anchor: date | datetime,
    events: list[Event],
    today: date | datetime,
    max_events: int = 4,
) -> list[MonthCell]:
    """
    Six-week month grid starting on the Sunday on or before the 1st.

    Holidays appear on every cell, including padding days from the adjacent
    months. Ordinary events only appear on in-month cells, capped at
    max_events with the remainder counted in overflow.
    """
    window = resolve_window(anchor, ViewMode.MONTH)
    by_day = index_by_day(events)
    current = _as_date(today)
    first = week_start(window.first_day)
    limit = max(0, max_events)

    cells = []
    for i in range(MONTH_GRID_CELLS):
        d = first + timedelta(days=i)
        in_month = window.first_day <= d <= window.last_day
        day_events = sort_for_list(by_day.get(d, []))
        ordinary = [e for e in day_events if not e.is_holiday] if in_month else []
        cells.append(
            MonthCell(
                date=d,
                in_month=in_month,
                is_today=d == current,
                holidays=[e for e in day_events if e.is_holiday],
                events=ordinary[:limit],
                overflow=len(ordinary) - len(ordinary[:limit]),
            )
        )
    return cells
