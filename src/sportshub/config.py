"""
Configuration management for SportsHub.

Uses Pydantic Settings to load configuration from environment variables
(prefixed with ``SPORTSHUB_``) with sensible defaults for development.
Engine constants such as the ELO scale or tier thresholds are not settings:
they live next to the engines so every calculation stays reproducible.

Usage:
    from sportshub.config import get_settings
    print(get_settings().seed_player_names)
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPORTSHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Roster Configuration
    # ==========================================================================

    seed_player_names: list[str] = Field(
        default=["Aarush Khanna", "Manav Sundar"],
        description="Names installed by seed_players() when the roster is empty",
    )

    # ==========================================================================
    # Subscription Configuration
    # ==========================================================================

    subscriber_max_pending: int = Field(
        default=0,
        ge=0,
        description=(
            "Maximum snapshots buffered per subscriber before the oldest is "
            "dropped. 0 keeps every snapshot."
        ),
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Format string passed to logging.basicConfig",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("seed_player_names")
    @classmethod
    def validate_seed_player_names(cls, v: list[str]) -> list[str]:
        """Strip names and require at least one."""
        names = [name.strip() for name in v if name.strip()]
        if not names:
            raise ValueError("seed_player_names must contain at least one name")
        return names


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once,
    which is important because loading from .env can be slow.
    """
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        datefmt="%H:%M:%S",
    )
