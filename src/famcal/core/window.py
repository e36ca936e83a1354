"""View windows and navigation - pure date arithmetic, no I/O."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

START_OF_DAY = time(0, 0)
END_OF_DAY = time(23, 59, 59, 999000)


class ViewMode(Enum):
    """Calendar view granularity."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    SCHEDULE = "Schedule"

    @classmethod
    def parse(cls, value: "str | ViewMode") -> "ViewMode":
        if isinstance(value, ViewMode):
            return value
        for mode in cls:
            if mode.value.lower() == str(value).strip().lower():
                return mode
        raise ValueError(f"Unknown view mode: {value!r}")


class Direction(Enum):
    """Navigation direction."""

    PREV = "prev"
    NEXT = "next"
    TODAY = "today"

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        if isinstance(value, Direction):
            return value
        for direction in cls:
            if direction.value == str(value).strip().lower():
                return direction
        raise ValueError(f"Unknown direction: {value!r}")


@dataclass(frozen=True)
class Window:
    """An inclusive, whole-day time range displayed by a view."""

    start: datetime
    end: datetime

    @classmethod
    def for_days(cls, first: date, last: date) -> "Window":
        return cls(
            start=datetime.combine(first, START_OF_DAY),
            end=datetime.combine(last, END_OF_DAY),
        )

    @property
    def first_day(self) -> date:
        return self.start.date()

    @property
    def last_day(self) -> date:
        return self.end.date()

    def days(self) -> list[date]:
        """Every calendar day covered, in order."""
        count = (self.last_day - self.first_day).days + 1
        return [self.first_day + timedelta(days=i) for i in range(count)]

    def contains(self, dt: datetime) -> bool:
        return self.start <= dt <= self.end


def _as_date(anchor: date | datetime) -> date:
    if isinstance(anchor, datetime):
        return anchor.date()
    return anchor


def week_start(day: date) -> date:
    """The Sunday on or before day."""
    # date.weekday() is Monday=0; shift to Sunday=0
    return day - timedelta(days=(day.weekday() + 1) % 7)


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def resolve_window(anchor: date | datetime, view_mode: "ViewMode | str") -> Window:
    """
    Compute the window a view displays for an anchor date.

    Pure function - no I/O. Time of day on the anchor is ignored.
    """
    mode = ViewMode.parse(view_mode)
    day = _as_date(anchor)

    if mode in (ViewMode.DAY, ViewMode.SCHEDULE):
        return Window.for_days(day, day)
    if mode == ViewMode.WEEK:
        first = week_start(day)
        return Window.for_days(first, first + timedelta(days=6))

    first = day.replace(day=1)
    last = day.replace(day=last_day_of_month(day.year, day.month))
    return Window.for_days(first, last)


def shift_months(anchor: date | datetime, months: int) -> date | datetime:
    """Move by whole calendar months, clamping the day to the target month."""
    index = anchor.year * 12 + (anchor.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(anchor.day, last_day_of_month(year, month))
    return anchor.replace(year=year, month=month, day=day)


def advance(
    anchor: date | datetime,
    view_mode: "ViewMode | str",
    direction: "Direction | str",
    today: date | datetime | None = None,
) -> date | datetime:
    """
    Step the anchor one view unit forward or back, or reset it to today.

    Pure function apart from the datetime.now() default for today.
    """
    mode = ViewMode.parse(view_mode)
    step = Direction.parse(direction)

    if step == Direction.TODAY:
        return today if today is not None else datetime.now()

    sign = 1 if step == Direction.NEXT else -1
    if mode == ViewMode.MONTH:
        return shift_months(anchor, sign)
    if mode == ViewMode.WEEK:
        return anchor + timedelta(days=7 * sign)
    return anchor + timedelta(days=sign)
