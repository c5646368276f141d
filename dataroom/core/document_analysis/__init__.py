"""
Document analysis pipeline.

Exports: AnalysisJob, DocumentAnalysisPipeline, AnalysisStore,
InMemoryAnalysisStore, TextExtractor, ProgressObserver
"""

from .entrypoint import DocumentAnalysisPipeline
from .job import AnalysisJob
from .progress import LoggingProgressObserver, NullProgressObserver, ProgressObserver
from .store import AnalysisStore, InMemoryAnalysisStore, TextExtractor

__all__ = [
    "AnalysisJob",
    "DocumentAnalysisPipeline",
    "AnalysisStore",
    "InMemoryAnalysisStore",
    "TextExtractor",
    "ProgressObserver",
    "NullProgressObserver",
    "LoggingProgressObserver",
]
