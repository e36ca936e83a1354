"""Overlap layout for a single day's timed events - pure logic, no I/O."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .events import Event
from .selection import events_on_day

HOUR_HEIGHT = 120


class LayoutMode(Enum):
    """How overlapping events are grouped into clusters."""

    PER_EVENT = "per_event"  # Each event's cluster is itself plus its direct overlaps
    CONNECTED = "connected"  # Clusters are connected components of the overlap graph

    @classmethod
    def parse(cls, value: "str | LayoutMode") -> "LayoutMode":
        if isinstance(value, LayoutMode):
            return value
        for mode in cls:
            if mode.value == str(value).strip().lower():
                return mode
        raise ValueError(f"Unknown layout mode: {value!r}")


@dataclass
class EventBox:
    """Where a timed event is drawn in a day column.

    left and width are fractions of the column width; top and height are in
    the same units as hour_height.
    """

    event: Event
    top: float
    height: float
    left: float
    width: float
    slot_index: int
    total_slots: int


def _hours(dt: datetime) -> float:
    return dt.hour + dt.minute / 60


def _per_event_clusters(events: list[Event]) -> dict[int, list[Event]]:
    clusters = {}
    for i, e in enumerate(events):
        cluster = [o for o in events if o.id != e.id and e.overlaps(o)]
        cluster.append(e)
        clusters[i] = cluster
    return clusters


def _connected_clusters(events: list[Event]) -> dict[int, list[Event]]:
    clusters: dict[int, list[Event]] = {}
    for i in range(len(events)):
        if i in clusters:
            continue
        component = []
        stack = [i]
        seen = {i}
        while stack:
            current = stack.pop()
            component.append(current)
            for j, other in enumerate(events):
                if j not in seen and events[current].overlaps(other):
                    seen.add(j)
                    stack.append(j)
        members = [events[j] for j in component]
        for j in component:
            clusters[j] = members
    return clusters


def layout_day(
    events: list[Event],
    day: date,
    hour_height: float = HOUR_HEIGHT,
    mode: "LayoutMode | str" = LayoutMode.PER_EVENT,
) -> list[EventBox]:
    """
    Assign horizontal slots and vertical extents to a day's timed events.

    Pure function - no I/O. All-day events and events starting on other days
    are ignored. Slots inside a cluster are ordered by event id.

    In PER_EVENT mode a chain A-B-C where A and C do not overlap gives B three
    slots but A and C only two each. CONNECTED mode gives all three the same
    slot count.
    """
    layout_mode = LayoutMode.parse(mode)
    timed = sorted(
        [e for e in events_on_day(events, day) if not e.is_all_day],
        key=lambda e: (e.start, e.id),
    )

    if layout_mode == LayoutMode.CONNECTED:
        clusters = _connected_clusters(timed)
    else:
        clusters = _per_event_clusters(timed)

    boxes = []
    for i, event in enumerate(timed):
        cluster = sorted(clusters[i], key=lambda e: e.id)
        total = len(cluster)
        index = next(k for k, member in enumerate(cluster) if member is event)
        start_hours = _hours(event.start)
        boxes.append(
            EventBox(
                event=event,
                top=start_hours * hour_height,
                height=(_hours(event.end) - start_hours) * hour_height,
                left=index / total,
                width=1 / total,
                slot_index=index,
                total_slots=total,
            )
        )
    return boxes
