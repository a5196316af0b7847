# File: feedback_ledger/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
import os


class Settings(BaseSettings):
    # ---------------------------
    # Meta / Pydantic settings
    # ---------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # Ignore unexpected env vars instead of erroring
    )

    # ---------------------------
    # Database
    # ---------------------------
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./feedback_ledger.db")
    DATABASE_ECHO: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # ---------------------------
    # Project
    # ---------------------------
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Feedback Ledger")

    # ---------------------------
    # Environment / Logging
    # ---------------------------
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")  # development | staging | production
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ---------------------------
    # Ledger bounds
    # ---------------------------
    MAX_TITLE_LENGTH: int = 100
    MAX_DESCRIPTION_LENGTH: int = 500
    MAX_FEEDBACK_TYPES: int = 10
    MAX_FEEDBACK_TYPE_LENGTH: int = 20
    MAX_REACTION_LENGTH: int = 20
    MAX_TEXT_LENGTH: int = 280
    MAX_RATING_BUCKETS: int = 10
    MAX_UINT: int = 2**63 - 1  # largest value a BIGINT column holds


settings = Settings()
