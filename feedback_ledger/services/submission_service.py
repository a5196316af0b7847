from typing import Optional
from sqlalchemy.orm import Session
from feedback_ledger import crud
from feedback_ledger.core.context import CallContext
from feedback_ledger.core.exceptions import (
    DuplicateSubmission,
    EventNotFound,
    InvalidFeedbackType,
    InvalidFeedbackValue,
    Unauthorized,
)
from feedback_ledger.models.event import Event
from feedback_ledger.models.feedback_submission import FeedbackSubmission
from feedback_ledger.schemas.feedback import RATING, REACTION, TEXT
from feedback_ledger.services.aggregation_service import AggregationService
from feedback_ledger.services.validation import (
    is_participant_authorized,
    is_rating_in_range,
    is_valid_feedback_type,
    window_error,
)
import logging

logger = logging.getLogger(__name__)


class SubmissionService:
    """Validation pipeline shared by the rating, reaction and text entry points.

    Checks run in a fixed order and the first failure wins:
    event exists, window is active, caller is allowed, kind is enabled,
    kind not yet submitted by caller, rating within range. Nothing is
    written until all of them pass.
    """

    @staticmethod
    def _validate(db: Session, ctx: CallContext, event_id: int, feedback_type: str) -> Event:
        event = crud.event.get(db, event_id)
        if not event:
            raise EventNotFound(f"Event {event_id} not found")

        error = window_error(event, ctx.height)
        if error is not None:
            raise error

        if event.requires_authentication:
            entry = crud.event_participant.get_entry(db, event_id=event_id, participant=ctx.caller)
        else:
            entry = None
        if not is_participant_authorized(event, entry):
            raise Unauthorized(f"{ctx.caller} is not allowed to submit to event {event_id}")

        if not is_valid_feedback_type(event, feedback_type):
            raise InvalidFeedbackType(f"'{feedback_type}' is not enabled for event {event_id}")

        if crud.participant_submission.has_submitted(
            db, event_id=event_id, participant=ctx.caller, feedback_type=feedback_type
        ):
            raise DuplicateSubmission(
                f"{ctx.caller} already submitted '{feedback_type}' feedback to event {event_id}"
            )
        return event

    @staticmethod
    def _record(
        db: Session,
        ctx: CallContext,
        event_id: int,
        feedback_type: str,
        anonymous: bool,
        rating_value: Optional[int] = None,
        reaction_value: Optional[str] = None,
        text_value: Optional[str] = None,
    ) -> FeedbackSubmission:
        submission_id = crud.feedback_counter.next_submission_id(db, event_id=event_id)
        submission = crud.feedback_submission.create_submission(
            db,
            event_id=event_id,
            submission_id=submission_id,
            submitter=ctx.caller,
            feedback_type=feedback_type,
            height=ctx.height,
            anonymous=anonymous,
            rating_value=rating_value,
            reaction_value=reaction_value,
            text_value=text_value,
        )
        crud.participant_submission.mark_submitted(
            db, event_id=event_id, participant=ctx.caller, feedback_type=feedback_type
        )
        logger.info(f"Recorded {feedback_type} submission {submission_id} for event {event_id}")
        return submission

    @staticmethod
    def submit_rating(db: Session, ctx: CallContext, event_id: int, rating_value: int, anonymous: bool) -> FeedbackSubmission:
        event = SubmissionService._validate(db, ctx, event_id, RATING)
        if not is_rating_in_range(event, rating_value):
            raise InvalidFeedbackValue(
                f"Rating {rating_value} outside {event.min_rating}-{event.max_rating}"
            )

        submission = SubmissionService._record(
            db, ctx, event_id, RATING, anonymous, rating_value=rating_value
        )
        AggregationService.record_rating(db, event_id=event_id, rating_value=rating_value)
        return submission

    @staticmethod
    def submit_reaction(db: Session, ctx: CallContext, event_id: int, reaction_value: str, anonymous: bool) -> FeedbackSubmission:
        SubmissionService._validate(db, ctx, event_id, REACTION)
        return SubmissionService._record(
            db, ctx, event_id, REACTION, anonymous, reaction_value=reaction_value
        )

    @staticmethod
    def submit_text(db: Session, ctx: CallContext, event_id: int, text_value: str, anonymous: bool) -> FeedbackSubmission:
        SubmissionService._validate(db, ctx, event_id, TEXT)
        return SubmissionService._record(
            db, ctx, event_id, TEXT, anonymous, text_value=text_value
        )
