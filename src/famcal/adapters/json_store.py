"""JSON file calendar source adapter."""

import json
import logging
from datetime import datetime
from pathlib import Path

from famcal.core.events import ColorKey, Event, Participant

logger = logging.getLogger(__name__)


class CalendarDataError(ValueError):
    """Raised when a calendar data file cannot be read."""


def _parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime as naive local time."""
    return datetime.fromisoformat(value).replace(tzinfo=None)


def _first(item: dict, *keys: str, default=None):
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return default


class JsonCalendarStore:
    """
    JSON file calendar source.

    Implements CalendarSource protocol. The file holds a single object with
    "participants" and "events" arrays. Records that can't be parsed are
    skipped with a warning.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self._data: dict | None = None

    def _load(self) -> dict:
        if self._data is not None:
            return self._data
        try:
            data = json.loads(self.path.read_text())
        except FileNotFoundError:
            raise CalendarDataError(f"Calendar data file not found: {self.path}")
        except json.JSONDecodeError as e:
            raise CalendarDataError(f"Invalid JSON in {self.path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise CalendarDataError(f"Cannot read calendar data file {self.path}: {e}")

        if not isinstance(data, dict):
            raise CalendarDataError(f"Expected a JSON object in {self.path}")
        self._data = data
        return data

    def _records(self, key: str) -> list[dict]:
        records = self._load().get(key, [])
        if not isinstance(records, list):
            raise CalendarDataError(f"'{key}' must be a list in {self.path}")
        return records

    def load_participants(self) -> list[Participant]:
        """Load the participant roster."""
        participants = []
        for item in self._records("participants"):
            try:
                participants.append(self._parse_participant(item))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed participant {item!r}: {e}")
        logger.debug(f"Loaded {len(participants)} participants from {self.path}")
        return participants

    def load_events(self) -> list[Event]:
        """Load the event list."""
        events = []
        for item in self._records("events"):
            try:
                events.append(self._parse_event(item))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed event {item!r}: {e}")
        logger.debug(f"Loaded {len(events)} events from {self.path}")
        return events

    def _parse_participant(self, item: dict) -> Participant:
        return Participant(
            id=str(item["id"]),
            name=item.get("name", ""),
            color=ColorKey.parse(item.get("color")),
            avatar=item.get("avatar"),
        )

    def _parse_event(self, item: dict) -> Event:
        start = _parse_instant(item["start"])
        end_raw = item.get("end")
        end = _parse_instant(end_raw) if end_raw else start

        participant_id = _first(item, "participantId", "participant_id")
        participant_ids = _first(item, "participantIds", "participant_ids", default=[])
        if isinstance(participant_ids, str):
            participant_ids = [participant_ids]

        return Event(
            id=str(item["id"]),
            title=item.get("title", "Untitled"),
            start=start,
            end=end,
            location=item.get("location") or "",
            participant_id=str(participant_id) if participant_id is not None else None,
            participant_ids=[str(pid) for pid in participant_ids],
            is_all_day=bool(_first(item, "isAllDay", "all_day", default=False)),
            is_holiday=bool(_first(item, "isHoliday", "holiday", default=False)),
        )
