"""Per-participant event counts over a window."""

from dataclasses import dataclass

from .events import Event, Participant
from .selection import in_window
from .window import Window


@dataclass(frozen=True)
class ParticipantStats:
    """Event counts for one participant.

    completed_tasks is always 0: there is no completion model.
    """

    total_tasks: int = 0
    completed_tasks: int = 0


def _belongs_to(event: Event, participant_id: str) -> bool:
    return event.participant_id == participant_id or participant_id in event.participant_ids


def aggregate_participant_stats(
    events: list[Event],
    window: Window,
    participants: list[Participant],
) -> dict[str, ParticipantStats]:
    """
    Count window events per participant.

    Pure function - no I/O. Ignores any active-participant filter; pass the
    full event list. Joint events count once for each of their participants.
    """
    visible = [e for e in events if in_window(e, window)]
    return {
        p.id: ParticipantStats(total_tasks=sum(1 for e in visible if _belongs_to(e, p.id)))
        for p in participants
    }
