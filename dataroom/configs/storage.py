"""
S3 documents bucket configuration.

Settings for the bucket holding uploaded documents awaiting analysis.

Dependencies: pydantic_settings
System role: Document storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentStorageSettings(BaseSettings):
    """Settings for S3 documents bucket operations."""

    model_config = SettingsConfigDict(
        env_prefix="S3_DOCUMENTS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="dataroom-dev-documents",
        description="S3 bucket for uploaded documents",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
