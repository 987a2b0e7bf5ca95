"""Library configuration using Pydantic Settings v2.

Loads configuration from ``DOCMETA_``-prefixed environment variables with
.env file support. Decoders read these settings when no explicit
``Settings`` instance is passed in.
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """docmeta settings.

    Configuration is loaded from environment variables prefixed with
    ``DOCMETA_``. A .env file in the working directory is also read if present.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────
    app_name: str = "docmeta"
    log_level: str = "INFO"

    # ── XML parsing ──────────────────────────────────────────────
    recover_malformed_xml: bool = True
    huge_tree: bool = False
    max_input_chars: int = 10_000_000  # 0 disables the limit

    # ── Decoding policy ──────────────────────────────────────────
    strict_timestamps: bool = False  # drop invalid created/modified instead of keeping them

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Accept any case; reject names the logging module does not know."""
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("max_input_chars")
    @classmethod
    def non_negative_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_input_chars must be >= 0")
        return v


@functools.lru_cache
def get_settings() -> Settings:
    """Return cached library settings instance."""
    return Settings()
