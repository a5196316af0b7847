# File: feedback_ledger/db/database.py
import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from feedback_ledger.core.config import settings
from feedback_ledger.db.base import Base

logger = logging.getLogger(__name__)


def create_engine_for(database_url: str, echo: bool = False) -> Engine:
    """Build an engine; in-memory SQLite shares one connection across sessions"""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def create_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = create_engine_for(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = create_session_factory(engine)


def init_db(bind: Engine = None) -> None:
    """Create every ledger table that does not exist yet"""
    # Register all models on Base.metadata
    import feedback_ledger.models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Ledger tables ready on {target.url}")
