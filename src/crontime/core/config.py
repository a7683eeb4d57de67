# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crontime.core.constants import DEFAULT_LOOKAHEAD_YEARS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRONTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Print the resolved membership sets before the result line
    debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("CRONTIME_DEBUG", "DEBUG"),
    )

    # Search
    lookahead_years: int = DEFAULT_LOOKAHEAD_YEARS

    @field_validator("lookahead_years")
    @classmethod
    def _check_lookahead(cls, v: int) -> int:
        if v < 1:
            raise ValueError("lookahead_years must be >= 1")
        return v

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v!r}")
        return v


def get_settings() -> Settings:
    return Settings()
