"""
Models for the document analysis pipeline.

Exports: Chunk, Document, DocumentReference, Keyword, ChunkAnalysis,
MergedAnalysis, ChatMessage, CompletionRequest, JobState, ChunkStatus,
ChunkOutcome, JobSnapshot, AnalysisRecord, RecordStatus, UploadEvent
"""

from .analysis import ChunkAnalysis, Keyword, MergedAnalysis
from .chunk import Chunk
from .completion import ChatMessage, CompletionRequest
from .document import Document, DocumentReference
from .job import ChunkOutcome, ChunkStatus, JobSnapshot, JobState
from .record import AnalysisRecord, RecordStatus, format_file_size
from .upload_event import UploadEvent

__all__ = [
    "Chunk",
    "Document",
    "DocumentReference",
    "Keyword",
    "ChunkAnalysis",
    "MergedAnalysis",
    "ChatMessage",
    "CompletionRequest",
    "JobState",
    "ChunkStatus",
    "ChunkOutcome",
    "JobSnapshot",
    "AnalysisRecord",
    "RecordStatus",
    "format_file_size",
    "UploadEvent",
]
