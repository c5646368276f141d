"""
Base configuration settings.

Shared fields for the data room analysis service: deployment environment,
log level and the browser origins allowed to call the API. Every settings
class that reads the project .env file inherits from here.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Common settings for the analysis API and the upload trigger."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment stage (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the API and the upload trigger",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the analysis API (JSON list in env)",
    )
