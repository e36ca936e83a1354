"""Built-in demo roster - December 2025 sample family calendar."""

from datetime import date, datetime

from famcal.core.events import ColorKey, Event, Participant

DEMO_TODAY = date(2025, 12, 2)


def _dec(day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(2025, 12, day, hour, minute)


class DemoCalendarSource:
    """
    In-memory demo calendar.

    Implements CalendarSource protocol. Used when no data file is configured.
    """

    today = DEMO_TODAY

    def load_participants(self) -> list[Participant]:
        return [
            Participant("u1", "A", ColorKey.YELLOW),
            Participant("u2", "A1", ColorKey.CAL_BLUE),
            Participant("u3", "Test", ColorKey.MINT),
            Participant("u4", "Test1", ColorKey.CAL_BLUE),
            Participant("u5", "Test2", ColorKey.PINK),
            Participant("u6", "Test3", ColorKey.YELLOW),
        ]

    def load_events(self) -> list[Event]:
        return [
            Event("1", "Jj", _dec(1, 14), _dec(1, 15), location="For Dinner", participant_id="u3"),
            Event("2", "Hh", _dec(1, 15, 45), _dec(1, 16, 45), participant_id="u2"),
            Event(
                "3",
                "Hn",
                _dec(1, 15, 45),
                _dec(1, 16, 45),
                participant_ids=["u2", "u5", "u1", "u6"],
            ),
            Event("4", "Yh", _dec(1, 15, 45), _dec(1, 16, 45), participant_id="u1"),
            # Holidays
            Event(
                "h1", "Christmas", _dec(25), _dec(25),
                participant_id="u3", is_all_day=True, is_holiday=True,
            ),
            Event(
                "h2", "New Year", datetime(2026, 1, 1), datetime(2026, 1, 1),
                participant_id="u3", is_all_day=True, is_holiday=True,
            ),
        ]
