# app/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be set from
    the environment or a `.env` file.
    """

    # --- Application Meta ---
    APP_NAME: str = "Conlang Morphology Engine"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = True

    # --- Security ---
    # None disables the X-API-Key check entirely.
    API_SECRET: Optional[str] = None

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Engine ---
    # Worker pool size for bulk paradigm generation.
    BULK_MAX_WORKERS: int = 4
    # Upper bound on words accepted by one bulk request.
    BULK_MAX_WORDS: int = 5000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
