# File: feedback_ledger/models/feedback_submission.py
from sqlalchemy import Column, String, Integer, BigInteger, ForeignKey, Boolean, CheckConstraint
from sqlalchemy.orm import relationship
from feedback_ledger.db.base import Base


class FeedbackSubmission(Base):
    __tablename__ = "feedback_submissions"
    __table_args__ = (
        # Exactly one payload column is populated
        CheckConstraint(
            "(CASE WHEN rating_value IS NULL THEN 0 ELSE 1 END)"
            " + (CASE WHEN reaction_value IS NULL THEN 0 ELSE 1 END)"
            " + (CASE WHEN text_value IS NULL THEN 0 ELSE 1 END) = 1",
            name="ck_feedback_submissions_single_payload",
        ),
    )

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    submission_id = Column(Integer, primary_key=True, autoincrement=False)
    submitter = Column(String(255), nullable=False, index=True)
    feedback_type = Column(String(20), nullable=False)

    # Payload
    rating_value = Column(BigInteger, nullable=True)
    reaction_value = Column(String(20), nullable=True)
    text_value = Column(String(280), nullable=True)

    # Tracking
    submitted_at_height = Column(BigInteger, nullable=False)
    is_anonymous = Column(Boolean, nullable=False, default=False)  # display hint only

    # Relationships
    event = relationship("Event", back_populates="submissions")
