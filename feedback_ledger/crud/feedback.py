# File: feedback_ledger/crud/feedback.py
from typing import List, Optional
from sqlalchemy.orm import Session
from feedback_ledger.crud.base import CRUDBase
from feedback_ledger.models.feedback_submission import FeedbackSubmission
from feedback_ledger.models.participant_submission import ParticipantSubmission
from feedback_ledger.models.submission_counter import EventFeedbackCounter


class CRUDFeedbackSubmission(CRUDBase[FeedbackSubmission]):

    def get_submission(self, db: Session, *, event_id: int, submission_id: int) -> Optional[FeedbackSubmission]:
        return self.get(db, (event_id, submission_id))

    def get_by_event(self, db: Session, *, event_id: int, skip: int = 0, limit: int = 100) -> List[FeedbackSubmission]:
        return (
            db.query(FeedbackSubmission)
            .filter(FeedbackSubmission.event_id == event_id)
            .order_by(FeedbackSubmission.submission_id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_submission(
        self,
        db: Session,
        *,
        event_id: int,
        submission_id: int,
        submitter: str,
        feedback_type: str,
        height: int,
        anonymous: bool,
        rating_value: Optional[int] = None,
        reaction_value: Optional[str] = None,
        text_value: Optional[str] = None,
    ) -> FeedbackSubmission:
        db_obj = FeedbackSubmission(
            event_id=event_id,
            submission_id=submission_id,
            submitter=submitter,
            feedback_type=feedback_type,
            rating_value=rating_value,
            reaction_value=reaction_value,
            text_value=text_value,
            submitted_at_height=height,
            is_anonymous=anonymous,
        )
        return self.add(db, db_obj)


class CRUDParticipantSubmission(CRUDBase[ParticipantSubmission]):

    def has_submitted(self, db: Session, *, event_id: int, participant: str, feedback_type: str) -> bool:
        marker = self.get(db, (event_id, participant, feedback_type))
        return bool(marker and marker.has_submitted)

    def mark_submitted(self, db: Session, *, event_id: int, participant: str, feedback_type: str) -> ParticipantSubmission:
        return self.add(
            db,
            ParticipantSubmission(
                event_id=event_id,
                participant=participant,
                feedback_type=feedback_type,
                has_submitted=True,
            ),
        )


class CRUDEventFeedbackCounter(CRUDBase[EventFeedbackCounter]):

    def get_count(self, db: Session, *, event_id: int) -> int:
        counter = self.get(db, event_id)
        return counter.count if counter else 0

    def next_submission_id(self, db: Session, *, event_id: int) -> int:
        counter = self.get(db, event_id)
        if counter is None:
            counter = self.add(db, EventFeedbackCounter(event_id=event_id, count=0))
        counter.count += 1
        db.flush()
        return counter.count

feedback_submission = CRUDFeedbackSubmission(FeedbackSubmission)
participant_submission = CRUDParticipantSubmission(ParticipantSubmission)
feedback_counter = CRUDEventFeedbackCounter(EventFeedbackCounter)
