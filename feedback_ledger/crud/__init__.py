from .ledger_state import ledger_state
from .event import event
from .event_participant import event_participant
from .feedback import feedback_submission, participant_submission, feedback_counter
from .rating_stats import rating_stats

__all__ = [
    "ledger_state", "event", "event_participant", "feedback_submission",
    "participant_submission", "feedback_counter", "rating_stats",
]
