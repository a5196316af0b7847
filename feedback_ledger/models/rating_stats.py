# File: feedback_ledger/models/rating_stats.py
from sqlalchemy import Column, Integer, BigInteger, ForeignKey
from feedback_ledger.db.base import Base


class EventRatingStats(Base):
    __tablename__ = "event_rating_stats"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    total_ratings = Column(Integer, nullable=False, default=0)
    rating_sum = Column(BigInteger, nullable=False, default=0)


class EventRatingBucket(Base):
    """Histogram bucket: how many accepted ratings had this value"""
    __tablename__ = "event_rating_buckets"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    rating_value = Column(BigInteger, primary_key=True, autoincrement=False)
    occurrences = Column(Integer, nullable=False, default=0)
