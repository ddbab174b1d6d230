"""
Application configuration loaded from environment variables.

Only the wiring code reads these settings; the domain layer never does.
All variables use the QRBILL_ prefix, e.g. QRBILL_REFERENCE_MODE=standard.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class Settings(BaseSettings):
    """
    Settings for payload encoding and rendering.

    Loaded from environment variables (QRBILL_ prefix) or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="QRBILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Payload
    reference_mode: Literal["literal", "standard"] = Field(
        default="literal",
        description="'literal' always writes NON and an empty reference; 'standard' writes the declared reference",
    )
    strict_validation: bool = Field(
        default=False,
        description="Check amount, currency and reference before encoding",
    )

    # QR raster
    qr_error_correction: Literal["L", "M", "Q", "H"] = Field(
        default="M",
        description="QR error correction level (the QR-bill standard uses M)",
    )
    qr_box_size: int = Field(default=10, ge=1, description="Pixels per QR module")
    qr_border: int = Field(default=4, ge=4, description="Quiet zone width in modules")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level applied by configure_logging()",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Loaded once and reused, so every component sees the same configuration.
    """
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the standard log format at ``level`` (defaults to settings.log_level)."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )
