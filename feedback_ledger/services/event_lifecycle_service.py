from sqlalchemy.orm import Session
from feedback_ledger import crud
from feedback_ledger.core.config import settings
from feedback_ledger.core.context import CallContext
from feedback_ledger.core.exceptions import (
    EventExpired,
    EventNotFound,
    InvalidFeedbackTypes,
    InvalidInput,
    InvalidRatingRange,
    NotAuthorized,
)
from feedback_ledger.models.event import Event
from feedback_ledger.models.event_participant import EventParticipant
from feedback_ledger.schemas.event import EventCreate
from feedback_ledger.services.validation import rating_bucket_span
import logging

logger = logging.getLogger(__name__)


class EventLifecycleService:
    """Creation, closure, extension and allow-list management of events.

    The only writer of event configuration after creation.
    """

    @staticmethod
    def create_event(db: Session, ctx: CallContext, event_in: EventCreate) -> Event:
        if not event_in.feedback_types:
            raise InvalidFeedbackTypes()
        if event_in.min_rating >= event_in.max_rating:
            raise InvalidRatingRange(
                f"min_rating ({event_in.min_rating}) must be lower than max_rating ({event_in.max_rating})"
            )
        if rating_bucket_span(event_in.min_rating, event_in.max_rating) > settings.MAX_RATING_BUCKETS:
            raise InvalidRatingRange(
                f"Rating range {event_in.min_rating}-{event_in.max_rating} spans more than "
                f"{settings.MAX_RATING_BUCKETS} values"
            )

        if ctx.height + event_in.duration > settings.MAX_UINT:
            raise InvalidInput(f"End height {ctx.height} + {event_in.duration} exceeds {settings.MAX_UINT}")

        event_id = crud.ledger_state.allocate_event_id(db)
        event = crud.event.create_with_creator(
            db, event_id=event_id, obj_in=event_in, creator=ctx.caller, height=ctx.height
        )
        logger.info(
            f"Created event {event.id} '{event.title}' by {ctx.caller} "
            f"window {event.start_height}-{event.end_height} types {event.feedback_types}"
        )
        return event

    @staticmethod
    def get_owned_event(db: Session, ctx: CallContext, event_id: int) -> Event:
        """Load an event the caller created, or raise"""
        event = crud.event.get(db, event_id)
        if not event:
            raise EventNotFound(f"Event {event_id} not found")
        if event.creator != ctx.caller:
            raise NotAuthorized(f"{ctx.caller} is not the creator of event {event_id}")
        return event

    @staticmethod
    def close_event(db: Session, ctx: CallContext, event_id: int) -> Event:
        event = EventLifecycleService.get_owned_event(db, ctx, event_id)
        # Closing twice is allowed and changes nothing
        crud.event.mark_closed(db, db_obj=event)
        logger.info(f"Closed event {event_id} at height {ctx.height}")
        return event

    @staticmethod
    def extend_event_duration(db: Session, ctx: CallContext, event_id: int, additional_blocks: int) -> Event:
        event = EventLifecycleService.get_owned_event(db, ctx, event_id)
        if ctx.height > event.end_height:
            raise EventExpired(f"Event {event_id} ended at height {event.end_height}")
        if event.end_height + additional_blocks > settings.MAX_UINT:
            raise InvalidInput(f"End height {event.end_height} + {additional_blocks} exceeds {settings.MAX_UINT}")

        crud.event.extend_end_height(db, db_obj=event, additional_blocks=additional_blocks)
        logger.info(f"Extended event {event_id} by {additional_blocks} to end at {event.end_height}")
        return event

    @staticmethod
    def set_participant(
        db: Session, ctx: CallContext, event_id: int, participant: str, allowed: bool
    ) -> EventParticipant:
        EventLifecycleService.get_owned_event(db, ctx, event_id)
        entry = crud.event_participant.set_allowed(
            db, event_id=event_id, participant=participant, allowed=allowed
        )
        action = "Granted" if allowed else "Revoked"
        logger.info(f"{action} participation in event {event_id} for {participant}")
        return entry
