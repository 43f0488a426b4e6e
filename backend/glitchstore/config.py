"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service runs with no environment at all
    - Environment variables use the GLITCH_ prefix (GLITCH_STORAGE_PATH, ...)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Limits exposed as DocumentLimits so core never sees the Settings object
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from glitchstore.core.domain_types import (
    DEFAULT_MAX_CSS_LENGTH,
    DEFAULT_MAX_PAYLOAD_BYTES,
    DEFAULT_MAX_TEXT_LENGTH,
    DocumentLimits,
    Locale,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="GLITCH_", case_sensitive=False, extra="ignore",
    )

    # Storage
    storage_path: str = "glitch_data.json"

    # Limits (bytes)
    max_text_length: int = Field(DEFAULT_MAX_TEXT_LENGTH, ge=0)
    max_css_length: int = Field(DEFAULT_MAX_CSS_LENGTH, ge=0)
    max_payload_bytes: int = Field(DEFAULT_MAX_PAYLOAD_BYTES, ge=1)

    # Responses
    locale: Locale = Locale.EN
    cors_allow_origin: str = "*"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def limits(self) -> DocumentLimits:
        return DocumentLimits(
            max_text_length=self.max_text_length,
            max_css_length=self.max_css_length,
            max_payload_bytes=self.max_payload_bytes,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
