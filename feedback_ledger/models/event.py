# File: feedback_ledger/models/event.py
from sqlalchemy import Column, String, Integer, BigInteger, Boolean, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from feedback_ledger.db.base import Base


class Event(Base):
    __tablename__ = "events"
    __table_args__ = (
        CheckConstraint("start_height <= end_height", name="ck_events_height_window"),
        CheckConstraint("min_rating < max_rating", name="ck_events_rating_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=False)
    creator = Column(String(255), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False, default="")

    # Active window, in host heights
    start_height = Column(BigInteger, nullable=False)
    end_height = Column(BigInteger, nullable=False)

    # Configuration
    feedback_types = Column(JSON, nullable=False)  # ordered list of labels
    min_rating = Column(BigInteger, nullable=False)
    max_rating = Column(BigInteger, nullable=False)
    requires_authentication = Column(Boolean, nullable=False, default=False)
    incentive_enabled = Column(Boolean, nullable=False, default=False)  # stored only

    is_closed = Column(Boolean, nullable=False, default=False)

    # Relationships
    participants = relationship("EventParticipant", back_populates="event")
    submissions = relationship("FeedbackSubmission", back_populates="event", order_by="FeedbackSubmission.submission_id")
