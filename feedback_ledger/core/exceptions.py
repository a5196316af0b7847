"""
Ledger error taxonomy.

Every rejected operation raises one of these. The entry-point layer turns
them into explicit failure results, so callers never see them unless they
use the services directly.
"""
from typing import Optional


class LedgerError(Exception):
    """Base class for all ledger rejections"""

    code: int = 0
    kind: str = "LedgerError"
    default_message: str = "Operation rejected"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.kind}(code={self.code}, message={self.message!r})"


class NotAuthorized(LedgerError):
    code = 100
    kind = "NotAuthorized"
    default_message = "Only the event creator can perform this action"


class EventNotFound(LedgerError):
    code = 101
    kind = "EventNotFound"
    default_message = "Event not found"


class EventExpired(LedgerError):
    code = 102
    kind = "EventExpired"
    default_message = "Event has ended"


class EventNotStarted(LedgerError):
    code = 103
    kind = "EventNotStarted"
    default_message = "Event is not accepting feedback"


class InvalidFeedbackType(LedgerError):
    code = 104
    kind = "InvalidFeedbackType"
    default_message = "Feedback type is not enabled for this event"


class InvalidFeedbackValue(LedgerError):
    code = 105
    kind = "InvalidFeedbackValue"
    default_message = "Feedback value is out of range"


class DuplicateSubmission(LedgerError):
    code = 106
    kind = "DuplicateSubmission"
    default_message = "Feedback of this type was already submitted"


class InvalidFeedbackTypes(LedgerError):
    code = 107
    kind = "InvalidFeedbackTypes"
    default_message = "At least one feedback type is required"


class InvalidRatingRange(LedgerError):
    code = 108
    kind = "InvalidRatingRange"
    default_message = "Invalid rating range"


class Unauthorized(LedgerError):
    code = 109
    kind = "Unauthorized"
    default_message = "Caller is not an allowed participant of this event"


class InvalidInput(LedgerError):
    code = 110
    kind = "InvalidInput"
    default_message = "Invalid input parameters"


class HeightRegression(LedgerError):
    code = 111
    kind = "HeightRegression"
    default_message = "Height is lower than one already observed"
