from typing import Optional
from sqlalchemy.orm import Session
from feedback_ledger import crud
from feedback_ledger.core.config import settings
from feedback_ledger.core.exceptions import InvalidFeedbackValue
from feedback_ledger.models.rating_stats import EventRatingStats
import logging

logger = logging.getLogger(__name__)


class AggregationService:
    """Running rating statistics per event"""

    @staticmethod
    def record_rating(db: Session, *, event_id: int, rating_value: int) -> EventRatingStats:
        """Fold one accepted rating into count, sum and histogram"""
        bucket = crud.rating_stats.get_bucket(db, event_id=event_id, rating_value=rating_value)
        if bucket is None:
            if crud.rating_stats.count_buckets(db, event_id=event_id) >= settings.MAX_RATING_BUCKETS:
                raise InvalidFeedbackValue(
                    f"Rating histogram for event {event_id} already holds "
                    f"{settings.MAX_RATING_BUCKETS} distinct values"
                )
            bucket = crud.rating_stats.create_bucket(db, event_id=event_id, rating_value=rating_value)

        stats = crud.rating_stats.get_or_create(db, event_id=event_id)
        if stats.rating_sum + rating_value > settings.MAX_UINT:
            raise InvalidFeedbackValue(f"Rating sum for event {event_id} would exceed {settings.MAX_UINT}")
        stats.total_ratings += 1
        stats.rating_sum += rating_value
        bucket.occurrences += 1
        db.flush()

        logger.debug(
            f"Event {event_id} ratings: count={stats.total_ratings} sum={stats.rating_sum}"
        )
        return stats

    @staticmethod
    def average(db: Session, *, event_id: int) -> Optional[int]:
        """Floor of sum / count, or None before the first rating"""
        stats = crud.rating_stats.get_stats(db, event_id=event_id)
        if stats is None or stats.total_ratings == 0:
            return None
        return stats.rating_sum // stats.total_ratings
