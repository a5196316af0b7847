from sqlalchemy import Column, Integer, ForeignKey
from feedback_ledger.db.base import Base


class EventFeedbackCounter(Base):
    __tablename__ = "event_feedback_counters"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    count = Column(Integer, nullable=False, default=0)
