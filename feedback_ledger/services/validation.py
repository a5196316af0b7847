"""
Submission predicates.

Pure functions over entity snapshots: they read only their arguments and
never touch the session, so the submission pipeline can compose them in
order and tests can call them directly.
"""
from typing import Optional

from feedback_ledger.core.exceptions import (
    EventExpired,
    EventNotStarted,
    LedgerError,
)
from feedback_ledger.models.event import Event
from feedback_ledger.models.event_participant import EventParticipant


def is_event_active(event: Event, height: int) -> bool:
    return event.start_height <= height <= event.end_height and not event.is_closed


def window_error(event: Event, height: int) -> Optional[LedgerError]:
    """Error for an inactive event, or None when it accepts submissions.

    Only "past the end" gets its own kind. Before the start and manually
    closed both report EventNotStarted.
    """
    if is_event_active(event, height):
        return None
    if height > event.end_height:
        return EventExpired()
    return EventNotStarted()


def is_participant_authorized(event: Event, entry: Optional[EventParticipant]) -> bool:
    if not event.requires_authentication:
        return True
    return entry is not None and bool(entry.allowed)


def is_valid_feedback_type(event: Event, feedback_type: str) -> bool:
    return feedback_type in (event.feedback_types or [])


def is_rating_in_range(event: Event, rating_value: int) -> bool:
    return event.min_rating <= rating_value <= event.max_rating


def rating_bucket_span(min_rating: int, max_rating: int) -> int:
    """Number of distinct integer ratings a configured range admits"""
    return max_rating - min_rating + 1
