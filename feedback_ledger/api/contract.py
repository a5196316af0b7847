# File: feedback_ledger/api/contract.py
"""
Entry points of the feedback ledger.

Each state-changing call runs in exactly one database transaction: it
either commits all of its writes or rolls back and reports the failure in
the returned ContractResult. Read-only calls never write.
"""
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session, sessionmaker
from feedback_ledger import crud
from feedback_ledger.core.context import CallContext
from feedback_ledger.core.exceptions import HeightRegression, InvalidInput, LedgerError
from feedback_ledger.schemas.event import Event, EventCreate, EventExtend
from feedback_ledger.schemas.event_participant import EventParticipant, EventParticipantUpdate
from feedback_ledger.schemas.feedback import (
    EventRatingStats,
    FeedbackSubmission,
    RatingFeedbackCreate,
    ReactionFeedbackCreate,
    TextFeedbackCreate,
)
from feedback_ledger.schemas.result import ContractResult
from feedback_ledger.services.event_lifecycle_service import EventLifecycleService
from feedback_ledger.services.query_service import QueryService
from feedback_ledger.services.submission_service import SubmissionService
import logging

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def parse_input(schema: Type[SchemaType], **data) -> SchemaType:
    """Validate raw parameters, reporting violations as InvalidInput"""
    try:
        return schema(**data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InvalidInput(f"Invalid parameters: {fields}") from e


class FeedbackContract:

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def _execute(self, operation: str, ctx: CallContext, action: Callable[[Session], object]) -> ContractResult:
        with self._session() as db:
            try:
                if not crud.ledger_state.observe_height(db, height=ctx.height):
                    raise HeightRegression(f"Height {ctx.height} is lower than one already observed")
                value = action(db)
                db.commit()
                return ContractResult.success(value)
            except LedgerError as e:
                db.rollback()
                logger.warning(f"{operation} rejected for {ctx.caller} at height {ctx.height}: {e.kind} - {e.message}")
                return ContractResult.failure(e)
            except Exception as e:
                logger.error(f"{operation} failed for {ctx.caller} at height {ctx.height}: {str(e)}")
                db.rollback()
                raise

    # ---------------------------
    # Event lifecycle
    # ---------------------------
    def create_event(
        self,
        ctx: CallContext,
        title: str,
        description: str,
        duration: int,
        feedback_types: List[str],
        min_rating: int,
        max_rating: int,
        requires_auth: bool,
        incentive_enabled: bool,
    ) -> ContractResult:
        def action(db: Session) -> int:
            event_in = parse_input(
                EventCreate,
                title=title,
                description=description,
                duration=duration,
                feedback_types=feedback_types,
                min_rating=min_rating,
                max_rating=max_rating,
                requires_auth=requires_auth,
                incentive_enabled=incentive_enabled,
            )
            return EventLifecycleService.create_event(db, ctx, event_in).id

        return self._execute("create_event", ctx, action)

    def add_event_participant(self, ctx: CallContext, event_id: int, participant: str) -> ContractResult:
        def action(db: Session) -> bool:
            participant_in = parse_input(EventParticipantUpdate, participant=participant)
            EventLifecycleService.set_participant(db, ctx, event_id, participant_in.participant, allowed=True)
            return True

        return self._execute("add_event_participant", ctx, action)

    def remove_event_participant(self, ctx: CallContext, event_id: int, participant: str) -> ContractResult:
        def action(db: Session) -> bool:
            participant_in = parse_input(EventParticipantUpdate, participant=participant)
            EventLifecycleService.set_participant(db, ctx, event_id, participant_in.participant, allowed=False)
            return True

        return self._execute("remove_event_participant", ctx, action)

    def close_event(self, ctx: CallContext, event_id: int) -> ContractResult:
        def action(db: Session) -> bool:
            EventLifecycleService.close_event(db, ctx, event_id)
            return True

        return self._execute("close_event", ctx, action)

    def extend_event_duration(self, ctx: CallContext, event_id: int, additional_blocks: int) -> ContractResult:
        def action(db: Session) -> bool:
            extend_in = parse_input(EventExtend, additional_blocks=additional_blocks)
            EventLifecycleService.extend_event_duration(db, ctx, event_id, extend_in.additional_blocks)
            return True

        return self._execute("extend_event_duration", ctx, action)

    # ---------------------------
    # Submissions
    # ---------------------------
    def submit_rating_feedback(self, ctx: CallContext, event_id: int, rating_value: int, anonymous: bool) -> ContractResult:
        def action(db: Session) -> int:
            feedback_in = parse_input(RatingFeedbackCreate, rating_value=rating_value, anonymous=anonymous)
            submission = SubmissionService.submit_rating(
                db, ctx, event_id, feedback_in.rating_value, feedback_in.anonymous
            )
            return submission.submission_id

        return self._execute("submit_rating_feedback", ctx, action)

    def submit_reaction_feedback(self, ctx: CallContext, event_id: int, reaction_value: str, anonymous: bool) -> ContractResult:
        def action(db: Session) -> int:
            feedback_in = parse_input(ReactionFeedbackCreate, reaction_value=reaction_value, anonymous=anonymous)
            submission = SubmissionService.submit_reaction(
                db, ctx, event_id, feedback_in.reaction_value, feedback_in.anonymous
            )
            return submission.submission_id

        return self._execute("submit_reaction_feedback", ctx, action)

    def submit_text_feedback(self, ctx: CallContext, event_id: int, text_value: str, anonymous: bool) -> ContractResult:
        def action(db: Session) -> int:
            feedback_in = parse_input(TextFeedbackCreate, text_value=text_value, anonymous=anonymous)
            submission = SubmissionService.submit_text(
                db, ctx, event_id, feedback_in.text_value, feedback_in.anonymous
            )
            return submission.submission_id

        return self._execute("submit_text_feedback", ctx, action)

    # ---------------------------
    # Read-only projections
    # ---------------------------
    def get_event(self, event_id: int) -> Optional[Event]:
        with self._session() as db:
            return QueryService.get_event(db, event_id)

    def get_event_count(self) -> int:
        with self._session() as db:
            return QueryService.get_event_count(db)

    def get_event_feedback(self, event_id: int) -> int:
        """Number of submissions accepted for the event"""
        with self._session() as db:
            return QueryService.get_event_feedback(db, event_id)

    def get_feedback_submission(self, event_id: int, submission_id: int) -> Optional[FeedbackSubmission]:
        with self._session() as db:
            return QueryService.get_feedback_submission(db, event_id, submission_id)

    def list_event_submissions(self, event_id: int, skip: int = 0, limit: int = 100) -> List[FeedbackSubmission]:
        with self._session() as db:
            return QueryService.list_event_submissions(db, event_id, skip=skip, limit=limit)

    def get_event_rating_stats(self, event_id: int) -> Optional[EventRatingStats]:
        with self._session() as db:
            return QueryService.get_event_rating_stats(db, event_id)

    def get_rating_distribution(self, event_id: int) -> Dict[int, int]:
        with self._session() as db:
            return QueryService.get_rating_distribution(db, event_id)

    def has_participant_submitted(self, event_id: int, participant: str, feedback_type: str) -> bool:
        with self._session() as db:
            return QueryService.has_participant_submitted(db, event_id, participant, feedback_type)

    def get_average_rating(self, event_id: int) -> Optional[int]:
        with self._session() as db:
            return QueryService.get_average_rating(db, event_id)

    def get_event_participant(self, event_id: int, participant: str) -> Optional[EventParticipant]:
        with self._session() as db:
            return QueryService.get_event_participant(db, event_id, participant)

    def is_event_active(self, event_id: int, height: int) -> bool:
        with self._session() as db:
            return QueryService.is_event_active(db, event_id, height)
