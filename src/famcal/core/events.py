"""Pure event domain logic - no I/O dependencies."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

logger = logging.getLogger(__name__)


class ColorKey(Enum):
    """Participant colour category."""

    MINT = "mint"
    CAL_BLUE = "calBlue"
    PINK = "pink"
    YELLOW = "yellow"

    @classmethod
    def parse(cls, value: "str | ColorKey | None") -> "ColorKey":
        """Resolve a colour key, falling back to the default palette entry."""
        if isinstance(value, ColorKey):
            return value
        for key in cls:
            if isinstance(value, str) and key.value.lower() == value.lower():
                return key
        logger.warning(f"Unknown colour key {value!r}, using {DEFAULT_COLOR.value}")
        return DEFAULT_COLOR

    @property
    def style(self) -> "ColorStyle":
        return PALETTE[self]


@dataclass(frozen=True)
class ColorStyle:
    """Display attributes for one colour category."""

    bg: str
    text: str
    border: str
    hex: str
    dark_hex: str


DEFAULT_COLOR = ColorKey.CAL_BLUE

PALETTE: dict[ColorKey, ColorStyle] = {
    ColorKey.MINT: ColorStyle("bg-mint", "text-mintDark", "border-mintDark", "#B2DFDB", "#00695C"),
    ColorKey.CAL_BLUE: ColorStyle(
        "bg-calBlue", "text-calBlueDark", "border-calBlueDark", "#B3CDE0", "#01579B"
    ),
    ColorKey.PINK: ColorStyle("bg-pink", "text-pinkDark", "border-pinkDark", "#F4B6C2", "#880E4F"),
    ColorKey.YELLOW: ColorStyle(
        "bg-yellow", "text-yellowDark", "border-yellowDark", "#F3E5AB", "#F57F17"
    ),
}


@dataclass(frozen=True)
class Participant:
    """A family member whose events appear on the calendar."""

    id: str
    name: str
    color: ColorKey = DEFAULT_COLOR
    avatar: str | None = None

    @property
    def initial(self) -> str:
        return self.name[:1]


@dataclass
class Event:
    """A calendar event."""

    id: str
    title: str
    start: datetime
    end: datetime
    location: str = ""
    participant_id: str | None = None
    participant_ids: list[str] = field(default_factory=list)
    is_all_day: bool = False
    is_holiday: bool = False

    @property
    def attributed_ids(self) -> list[str]:
        """Participant ids this event belongs to (list wins over the single id)."""
        if self.participant_ids:
            return list(self.participant_ids)
        if self.participant_id:
            return [self.participant_id]
        return []

    @property
    def is_joint(self) -> bool:
        return len(self.participant_ids) > 1

    @property
    def day(self) -> date:
        return self.start.date()

    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() / 60)

    def overlaps(self, other: "Event") -> bool:
        """Check if this event overlaps another. Touching endpoints do not overlap."""
        return overlaps(self, other)


def overlaps(a: Event, b: Event) -> bool:
    """Strict interval overlap: a.start < b.end and a.end > b.start."""
    return a.start < b.end and a.end > b.start
