from sqlalchemy import Column, Integer, BigInteger
from feedback_ledger.db.base import Base


class LedgerState(Base):
    """Single-row table holding the global counters of the ledger"""
    __tablename__ = "ledger_state"

    id = Column(Integer, primary_key=True, default=1)
    event_count = Column(Integer, nullable=False, default=0)  # last allocated event id
    last_height = Column(BigInteger, nullable=False, default=0)
