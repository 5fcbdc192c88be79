"""Resolver configuration.

Values come from code defaults, overridden by LOGANALYTICS_* environment
variables (e.g. LOGANALYTICS_DEFAULT_TIME_COLUMN=timestamp).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_TIME_COLUMN = "TimeGenerated"
DEFAULT_SELECT_ALL_VALUE = "all"


class ResolverSettings(BaseSettings):
    """Settings shared by every resolver built from configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOGANALYTICS_",
        case_sensitive=False,
        extra="ignore",
    )

    default_time_column: str = Field(
        default=DEFAULT_TIME_COLUMN,
        min_length=1,
        description="Column used by $__timeFilter when no column is given",
    )
    select_all_value: str = Field(
        default=DEFAULT_SELECT_ALL_VALUE,
        min_length=1,
        description="Multi-value variable option meaning 'no filter'",
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level")


@lru_cache(maxsize=1)
def get_settings() -> ResolverSettings:
    """Get the process-wide settings (loaded once)."""
    return ResolverSettings()


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads (for testing)."""
    get_settings.cache_clear()
