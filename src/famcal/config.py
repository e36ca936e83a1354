"""Configuration management for famcal."""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from .adapters.demo_seed import DemoCalendarSource
from .adapters.json_store import JsonCalendarStore
from .core.layout import HOUR_HEIGHT
from .ports.calendar_source import CalendarSource

logger = logging.getLogger(__name__)

FAMCAL_HOME = Path(os.environ.get("FAMCAL_HOME", Path.home() / "famcal"))
CONFIG_FILE = FAMCAL_HOME / "config" / "famcal.conf"


@dataclass
class Config:
    """famcal configuration."""

    data_file: str = ""
    default_view: str = "Schedule"
    today: str = ""  # Pinned reference date (YYYY-MM-DD); empty means the real today
    hour_height: int = HOUR_HEIGHT
    layout_mode: str = "per_event"
    active_participants: list[str] = field(default_factory=list)
    month_cell_limit: int = 4

    def reference_date(self) -> date:
        """The 'current' date used for today navigation and highlighting."""
        if self.today:
            try:
                return date.fromisoformat(self.today)
            except ValueError:
                logger.warning(f"Invalid TODAY value {self.today!r}, using the real date")
        if not self.data_file:
            return DemoCalendarSource.today
        return date.today()


def get_source(config: Config) -> CalendarSource:
    """Resolve the calendar source from config."""
    if config.data_file:
        return JsonCalendarStore(config.data_file)
    return DemoCalendarSource()


def _parse_int(key: str, value: str, default: int, minimum: int = 0) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}")
        return default
    if number < minimum:
        logger.warning(f"{key.upper()} must be at least {minimum}, got {number}")
        return default
    return number


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from famcal.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "default_view":
                config.default_view = value
            case "today":
                config.today = value
            case "hour_height":
                config.hour_height = _parse_int(key, value, config.hour_height, minimum=1)
            case "layout_mode":
                config.layout_mode = value
            case "active_participants":
                config.active_participants = [p.strip() for p in value.split(",") if p.strip()]
            case "month_cell_limit":
                config.month_cell_limit = _parse_int(key, value, config.month_cell_limit)
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
