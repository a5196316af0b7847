# File: feedback_ledger/main.py
import logging
from typing import Optional
from feedback_ledger.api.contract import FeedbackContract
from feedback_ledger.core.config import settings
from feedback_ledger.db import database

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=getattr(logging, (level or settings.LOG_LEVEL).upper()))


def create_contract(
    database_url: Optional[str] = None, create_tables: bool = True, setup_logging: bool = True
) -> FeedbackContract:
    """Wire a FeedbackContract to the configured (or given) database.

    Pass setup_logging=False when the host application configures logging itself.
    """
    if setup_logging:
        configure_logging()

    if database_url:
        bind = database.create_engine_for(database_url, echo=settings.DATABASE_ECHO)
        session_factory = database.create_session_factory(bind)
    else:
        bind = database.engine
        session_factory = database.SessionLocal

    if create_tables:
        database.init_db(bind)

    logger.info(f"{settings.PROJECT_NAME} ready ({settings.ENVIRONMENT})")
    return FeedbackContract(session_factory)
