from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from feedback_ledger import crud
from feedback_ledger.schemas.event import Event as EventSchema
from feedback_ledger.schemas.event_participant import EventParticipant as EventParticipantSchema
from feedback_ledger.schemas.feedback import (
    EventRatingStats as EventRatingStatsSchema,
    FeedbackSubmission as FeedbackSubmissionSchema,
)
from feedback_ledger.services.aggregation_service import AggregationService
from feedback_ledger.services.validation import is_event_active


class QueryService:
    """Read-only projections. Missing keys give None, never an error."""

    @staticmethod
    def get_event(db: Session, event_id: int) -> Optional[EventSchema]:
        event = crud.event.get(db, event_id)
        return EventSchema.model_validate(event) if event else None

    @staticmethod
    def get_event_count(db: Session) -> int:
        return crud.ledger_state.get_event_count(db)

    @staticmethod
    def get_event_feedback(db: Session, event_id: int) -> int:
        return crud.feedback_counter.get_count(db, event_id=event_id)

    @staticmethod
    def get_feedback_submission(db: Session, event_id: int, submission_id: int) -> Optional[FeedbackSubmissionSchema]:
        submission = crud.feedback_submission.get_submission(
            db, event_id=event_id, submission_id=submission_id
        )
        return FeedbackSubmissionSchema.model_validate(submission) if submission else None

    @staticmethod
    def list_event_submissions(db: Session, event_id: int, skip: int = 0, limit: int = 100) -> List[FeedbackSubmissionSchema]:
        submissions = crud.feedback_submission.get_by_event(db, event_id=event_id, skip=skip, limit=limit)
        return [FeedbackSubmissionSchema.model_validate(s) for s in submissions]

    @staticmethod
    def get_event_rating_stats(db: Session, event_id: int) -> Optional[EventRatingStatsSchema]:
        stats = crud.rating_stats.get_stats(db, event_id=event_id)
        if not stats:
            return None
        return EventRatingStatsSchema(
            event_id=stats.event_id,
            total_ratings=stats.total_ratings,
            rating_sum=stats.rating_sum,
            rating_distribution=crud.rating_stats.get_distribution(db, event_id=event_id),
        )

    @staticmethod
    def get_rating_distribution(db: Session, event_id: int) -> Dict[int, int]:
        return crud.rating_stats.get_distribution(db, event_id=event_id)

    @staticmethod
    def get_average_rating(db: Session, event_id: int) -> Optional[int]:
        return AggregationService.average(db, event_id=event_id)

    @staticmethod
    def has_participant_submitted(db: Session, event_id: int, participant: str, feedback_type: str) -> bool:
        return crud.participant_submission.has_submitted(
            db, event_id=event_id, participant=participant, feedback_type=feedback_type
        )

    @staticmethod
    def get_event_participant(db: Session, event_id: int, participant: str) -> Optional[EventParticipantSchema]:
        entry = crud.event_participant.get_entry(db, event_id=event_id, participant=participant)
        return EventParticipantSchema.model_validate(entry) if entry else None

    @staticmethod
    def is_event_active(db: Session, event_id: int, height: int) -> bool:
        event = crud.event.get(db, event_id)
        return bool(event) and is_event_active(event, height)
