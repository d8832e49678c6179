# app/config.py
"""
Startup configuration for the Book Reviews API.

Settings are read once from `.env` and the process environment and handed
to `create_app` explicitly, so nothing downstream reads os.environ.
"""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_DATABASE_URL = "sqlite:///Reviews.db"  # file in project root


class Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    app_name: str = "Book Reviews API"
    app_version: str = "0.1.0"
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    sql_echo: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("database_url must not be empty")
        return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise RuntimeError(f"{name} must be boolean-like, got {raw!r}")


def load_settings(*, load_env: bool = True) -> Settings:
    """
    Build Settings from `.env` and the environment, applying defaults.
    """
    if load_env:
        load_dotenv()

    values = {
        "app_name": os.getenv("APP_NAME", "Book Reviews API"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "database_url": os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "host": os.getenv("API_HOST", "127.0.0.1"),
        "port": os.getenv("API_PORT", "8000"),
        "sql_echo": _env_bool("SQL_ECHO", False),
    }

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
