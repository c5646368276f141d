"""
Analysis service orchestrator.

Validates caller input, runs one AnalysisJob per request through the
pipeline and reads stored analyses back.

Dependencies: dataroom.core.document_analysis, dataroom.core.exceptions
System role: Document analysis use cases for the HTTP API
"""

import logging

from dataroom.core.document_analysis import DocumentAnalysisPipeline
from dataroom.core.document_analysis.models import AnalysisRecord, MergedAnalysis
from dataroom.core.exceptions import (
    AnalysisNotFoundError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AnalysisService:
    """Document analysis use cases."""

    def __init__(self, pipeline: DocumentAnalysisPipeline) -> None:
        self.pipeline = pipeline

    async def analyze_document(self, file_path: str | None, user_id: str | None) -> MergedAnalysis:
        """
        Analyze an uploaded document and persist the result.

        Args:
            file_path: Storage key of the document
            user_id: Caller identity

        Returns:
            MergedAnalysis: Merged, persisted analysis

        Raises:
            UnauthenticatedError: No caller identity
            ValidationError: No file path
            AnalysisError: Pipeline failure (extraction, chunk, persistence)
        """
        if not user_id:
            raise UnauthenticatedError("User must be authenticated to analyze documents")
        if not file_path:
            raise ValidationError("File path is required", field="filePath")

        logger.info(
            "%s:analyze_document - Analysis requested",
            __name__,
            extra={"user_id": user_id, "file_path": file_path},
        )
        return await self.pipeline.analyze(file_path, user_id)

    async def get_analysis(self, user_id: str, document_name: str) -> AnalysisRecord:
        """
        Fetch the stored analysis of one document.

        Raises:
            AnalysisNotFoundError: Nothing stored for (user, document)
        """
        record = await self.pipeline.store.get_analysis(user_id, document_name)
        if record is None:
            raise AnalysisNotFoundError(user_id, document_name)
        return record
