from .ledger_state import LedgerState
from .event import Event
from .event_participant import EventParticipant
from .feedback_submission import FeedbackSubmission
from .participant_submission import ParticipantSubmission
from .submission_counter import EventFeedbackCounter
from .rating_stats import EventRatingStats, EventRatingBucket

__all__ = [
    "LedgerState", "Event", "EventParticipant", "FeedbackSubmission",
    "ParticipantSubmission", "EventFeedbackCounter", "EventRatingStats", "EventRatingBucket",
]
