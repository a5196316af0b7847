from sqlalchemy import Column, String, Integer, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from feedback_ledger.db.base import Base


class EventParticipant(Base):
    """Authorization entry for an event that requires authentication.

    Revoking sets ``allowed`` to False; rows are never deleted.
    """
    __tablename__ = "event_participants"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    participant = Column(String(255), primary_key=True)
    allowed = Column(Boolean, nullable=False, default=False)

    # Relationships
    event = relationship("Event", back_populates="participants")
