from sqlalchemy import Column, String, Integer, ForeignKey, Boolean
from feedback_ledger.db.base import Base


class ParticipantSubmission(Base):
    """Dedup marker: one row per (event, participant, feedback type) ever accepted"""
    __tablename__ = "participant_submissions"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    participant = Column(String(255), primary_key=True)
    feedback_type = Column(String(20), primary_key=True)
    has_submitted = Column(Boolean, nullable=False, default=True)
