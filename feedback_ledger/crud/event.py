# File: feedback_ledger/crud/event.py
from sqlalchemy.orm import Session
from feedback_ledger.crud.base import CRUDBase
from feedback_ledger.models.event import Event
from feedback_ledger.schemas.event import EventCreate


class CRUDEvent(CRUDBase[Event]):

    def create_with_creator(
        self, db: Session, *, event_id: int, obj_in: EventCreate, creator: str, height: int
    ) -> Event:
        db_obj = Event(
            id=event_id,
            creator=creator,
            title=obj_in.title,
            description=obj_in.description,
            start_height=height,
            end_height=height + obj_in.duration,
            feedback_types=list(obj_in.feedback_types),
            min_rating=obj_in.min_rating,
            max_rating=obj_in.max_rating,
            requires_authentication=obj_in.requires_auth,
            incentive_enabled=obj_in.incentive_enabled,
            is_closed=False,
        )
        return self.add(db, db_obj)

    def mark_closed(self, db: Session, *, db_obj: Event) -> Event:
        db_obj.is_closed = True
        db.flush()
        return db_obj

    def extend_end_height(self, db: Session, *, db_obj: Event, additional_blocks: int) -> Event:
        db_obj.end_height = db_obj.end_height + additional_blocks
        db.flush()
        return db_obj

event = CRUDEvent(Event)
