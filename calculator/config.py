"""
Application settings using Pydantic Settings.

Every field can be overridden with a ``CALCULATOR_``-prefixed environment
variable (e.g. ``CALCULATOR_PORT=8000``) or from a ``.env`` file in the
working directory.
"""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the calculator web app."""

    model_config = SettingsConfigDict(
        env_prefix="CALCULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="Compound Interest Calculator",
        description="Title shown on the page",
    )
    debug: bool = Field(default=False, description="Flask debug mode")
    host: str = Field(default="127.0.0.1", description="Dev server bind address")
    port: int = Field(default=5000, ge=1, le=65535, description="Dev server port")

    log_level: str = Field(default="INFO", description="Root logging level")

    cors_origins: List[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call /api/*",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
