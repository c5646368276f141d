"""
Task modules for the document analysis pipeline.

Exports: ChunkingTask, MergingTask, ExtractionTask, S3DownloadTask, ParsingTask
"""

from .chunking_task import DEFAULT_MAX_CHUNK_CHARS, ChunkingTask
from .extraction_task import ExtractionTask
from .merging_task import MergingTask
from .parsing_task import ParsingError, ParsingTask
from .s3_download_task import S3DownloadError, S3DownloadTask

__all__ = [
    "DEFAULT_MAX_CHUNK_CHARS",
    "ChunkingTask",
    "MergingTask",
    "ExtractionTask",
    "ParsingTask",
    "ParsingError",
    "S3DownloadTask",
    "S3DownloadError",
]
