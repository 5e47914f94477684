from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "Javlin Waitlist"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = ["*"]

    # ── Database ────────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./waitlist.db"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 30  # (burst capacity)
    DB_POOL_TIMEOUT: int = 30
    CREATE_TABLES_ON_STARTUP: bool = False

    # ── Waitlist ────────────────────────────────
    DEFAULT_WAITLIST_SOURCE: str = "landing"

    # ── Logging ─────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE_NAME: str = "waitlist.log"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
