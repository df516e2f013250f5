"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The backing file path is read once, when the store is built, and stays
fixed for the lifetime of that store.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """
    Expense tracker settings.

    Loads configuration from EXPENSE_TRACKER_* environment variables
    and the .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Persistence
    data_file: Path = Field(
        default=Path("expenses.json"),
        description="Path of the JSON file holding all expenses"
    )
    fsync_on_save: bool = Field(
        default=True,
        description="Flush the temporary file to disk before replacing the data file"
    )

    # Records
    default_category: str = Field(
        default="Other",
        min_length=1,
        description="Category used when none is given"
    )

    # Reports
    currency_symbol: str = Field(
        default="$",
        description="Symbol printed in front of every amount"
    )
    description_width: int = Field(
        default=24,
        ge=4,
        le=200,
        description="Width of the Description column in the expense table"
    )

    @field_validator('default_category')
    @classmethod
    def strip_default_category(cls, v: str) -> str:
        """Blank defaults would defeat the purpose of a default."""
        v = v.strip()
        if not v:
            raise ValueError("default_category cannot be blank")
        return v


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
