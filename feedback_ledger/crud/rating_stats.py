from typing import Dict, Optional
from sqlalchemy.orm import Session
from feedback_ledger.crud.base import CRUDBase
from feedback_ledger.models.rating_stats import EventRatingStats, EventRatingBucket


class CRUDEventRatingStats(CRUDBase[EventRatingStats]):

    def get_stats(self, db: Session, *, event_id: int) -> Optional[EventRatingStats]:
        return self.get(db, event_id)

    def get_or_create(self, db: Session, *, event_id: int) -> EventRatingStats:
        stats = self.get(db, event_id)
        if stats is None:
            stats = self.add(db, EventRatingStats(event_id=event_id, total_ratings=0, rating_sum=0))
        return stats

    def get_bucket(self, db: Session, *, event_id: int, rating_value: int) -> Optional[EventRatingBucket]:
        return db.get(EventRatingBucket, (event_id, rating_value))

    def count_buckets(self, db: Session, *, event_id: int) -> int:
        return db.query(EventRatingBucket).filter(EventRatingBucket.event_id == event_id).count()

    def create_bucket(self, db: Session, *, event_id: int, rating_value: int) -> EventRatingBucket:
        bucket = EventRatingBucket(event_id=event_id, rating_value=rating_value, occurrences=0)
        db.add(bucket)
        db.flush()
        return bucket

    def get_distribution(self, db: Session, *, event_id: int) -> Dict[int, int]:
        results = (
            db.query(EventRatingBucket.rating_value, EventRatingBucket.occurrences)
            .filter(EventRatingBucket.event_id == event_id)
            .order_by(EventRatingBucket.rating_value)
            .all()
        )
        return {rating: count for rating, count in results}

rating_stats = CRUDEventRatingStats(EventRatingStats)
