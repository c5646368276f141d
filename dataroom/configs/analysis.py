"""
Document analysis pipeline configuration.

Settings for chunking and the per-chunk failure policy of AnalysisJob.

Dependencies: pydantic, pydantic_settings
System role: Pipeline behavior configuration
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkFailurePolicy(str, Enum):
    """
    What an analysis job does when a single chunk cannot be analyzed.

    ABORT: Fail the whole job with the chunk's error
    SKIP: Record the failure, leave the chunk out of the merge, keep going
    """

    ABORT = "abort"
    SKIP = "skip"


class AnalysisSettings(BaseSettings):
    """Settings for the chunked analysis pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANALYSIS_",
        case_sensitive=False,
        extra="ignore",
    )

    max_chunk_chars: int = Field(
        default=8000,
        ge=1,
        description="Maximum chunk size in characters",
    )
    chunk_failure_policy: ChunkFailurePolicy = Field(
        default=ChunkFailurePolicy.ABORT,
        description="'abort' fails the job on the first chunk error, 'skip' omits the chunk",
    )
