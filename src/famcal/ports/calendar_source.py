"""Calendar source interface."""

from typing import Protocol

from famcal.core.events import Event, Participant


class CalendarSource(Protocol):
    """Interface for loading the participant roster and event list."""

    def load_participants(self) -> list[Participant]:
        """Load every participant."""
        ...

    def load_events(self) -> list[Event]:
        """Load every event."""
        ...
