from typing import Optional
from sqlalchemy.orm import Session
from feedback_ledger.crud.base import CRUDBase
from feedback_ledger.models.event_participant import EventParticipant


class CRUDEventParticipant(CRUDBase[EventParticipant]):

    def get_entry(self, db: Session, *, event_id: int, participant: str) -> Optional[EventParticipant]:
        return self.get(db, (event_id, participant))

    def set_allowed(self, db: Session, *, event_id: int, participant: str, allowed: bool) -> EventParticipant:
        entry = self.get_entry(db, event_id=event_id, participant=participant)
        if entry is None:
            return self.add(db, EventParticipant(event_id=event_id, participant=participant, allowed=allowed))
        entry.allowed = allowed
        db.flush()
        return entry

event_participant = CRUDEventParticipant(EventParticipant)
