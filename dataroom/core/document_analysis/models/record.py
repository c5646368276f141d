"""
Persisted analysis record model.

Shape stored per (owner, document name):
{name, size, status, uploadDate, analysis, analysisTimestamp}

Dependencies: pydantic
System role: AnalysisStore read/write contract
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .analysis import MergedAnalysis


class RecordStatus(str, Enum):
    """Status of a stored document record."""

    ANALYZING = "analyzing"
    COMPLETED = "completed"
    FAILED = "failed"


class AnalysisRecord(BaseModel):
    """Stored document entry carrying its merged analysis."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    owner_id: str | None = Field(default=None, exclude=True, description="Owning user; never serialized")
    name: str
    size: str | None = None
    status: RecordStatus
    upload_date: datetime
    analysis: MergedAnalysis
    analysis_timestamp: datetime


def format_file_size(size_bytes: int) -> str:
    """Human-readable size as shown in the document list (bytes/KB/MB/GB)."""
    if size_bytes < 1024:
        return f"{size_bytes} bytes"
    if size_bytes < 1024**2:
        return f"{size_bytes / 1024:.1f} KB"
    if size_bytes < 1024**3:
        return f"{size_bytes / 1024**2:.1f} MB"
    return f"{size_bytes / 1024**3:.1f} GB"
