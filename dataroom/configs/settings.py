"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from dataroom.configs.analysis import AnalysisSettings
from dataroom.configs.base import BaseSettings
from dataroom.configs.completion import CompletionSettings
from dataroom.configs.database import DatabaseSettings
from dataroom.configs.storage import DocumentStorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    completion: CompletionSettings = Field(default_factory=CompletionSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    storage: DocumentStorageSettings = Field(default_factory=DocumentStorageSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at first call, never at import time.

    Returns:
        Settings: Application settings instance

    Usage:
        from dataroom.configs import get_settings
        settings = get_settings()
    """
    return Settings()
