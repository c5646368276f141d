"""
LLM completion service configuration.

Settings for the chat completion endpoint, model selection and the
rate-limit retry schedule applied by CompletionClient.

Dependencies: pydantic, pydantic_settings
System role: Explicit configuration value handed to the completion client
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompletionSettings(BaseSettings):
    """OpenAI-compatible completion endpoint configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="API key for the completion service",
    )
    base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the chat completions API",
    )
    model: str = Field(
        default="gpt-4o-2024-08-06",
        description="Model that supports json_schema structured output",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Total attempts for a rate-limited request (first call included)",
    )
    base_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Backoff base; retry n waits base_delay_ms * n * 2",
    )
    request_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Per-request timeout in seconds",
    )
