"""
Analysis job state models.

States, per-chunk outcomes and the read-only job snapshot.

Dependencies: pydantic
System role: State machine vocabulary for AnalysisJob
"""

from enum import Enum

from pydantic import BaseModel, Field

from dataroom.configs.analysis import ChunkFailurePolicy


class JobState(str, Enum):
    """
    Analysis job lifecycle states.

    PENDING: Created, not started
    EXTRACTING: Fetching and parsing the document
    CHUNKING: Splitting extracted text
    ANALYZING: Sending chunks to the completion service, in order
    MERGING: Folding successful chunk analyses
    PERSISTING: Upserting the merged record
    COMPLETED: Terminal success
    FAILED: Terminal failure
    """

    PENDING = "pending"
    EXTRACTING = "extracting"
    CHUNKING = "chunking"
    ANALYZING = "analyzing"
    MERGING = "merging"
    PERSISTING = "persisting"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobState.COMPLETED, JobState.FAILED)


class ChunkStatus(str, Enum):
    """Outcome of a single chunk analysis."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class ChunkOutcome(BaseModel):
    """Recorded result of analyzing one chunk."""

    index: int = Field(ge=0)
    status: ChunkStatus
    attempts: int | None = Field(default=None, description="Completion attempts when known")
    error_kind: str | None = None
    error_message: str | None = None


class JobSnapshot(BaseModel):
    """Point-in-time view of an analysis job."""

    job_id: str
    owner_id: str
    state: JobState
    failure_policy: ChunkFailurePolicy
    total_chunks: int = 0
    progress: float = Field(default=0.0, ge=0.0, le=1.0)
    outcomes: list[ChunkOutcome] = Field(default_factory=list)
    error: str | None = None

    @property
    def retry_count(self) -> int:
        """Retries spent across all chunks, successful or not."""
        return sum(max(o.attempts - 1, 0) for o in self.outcomes if o.attempts)

    @property
    def skipped_count(self) -> int:
        """Chunks left out of the merge under the skip policy."""
        return sum(1 for o in self.outcomes if o.status is ChunkStatus.SKIPPED)
