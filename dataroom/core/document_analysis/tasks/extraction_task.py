"""
Text extraction task.

Fetches an uploaded document from S3 and extracts its text. Implements the
TextExtractor collaborator used by AnalysisJob.

Dependencies: boto3 (via S3DownloadTask), langchain_community (via ParsingTask), fastapi.concurrency
System role: First stage of the analysis pipeline
"""

import logging
import os
import shutil

from fastapi.concurrency import run_in_threadpool

from dataroom.core.exceptions import ExtractionError

from ..models import Document, DocumentReference
from .parsing_task import ParsingError, ParsingTask
from .s3_download_task import S3DownloadError, S3DownloadTask

logger = logging.getLogger(__name__)


class ExtractionTask:
    """Download and parse a document into a Document."""

    def __init__(self, download_task: S3DownloadTask, parsing_task: ParsingTask | None = None) -> None:
        self._download_task = download_task
        self._parsing_task = parsing_task or ParsingTask()

    async def extract(self, reference: DocumentReference) -> Document:
        """
        Extract text for a document reference.

        Blocking S3 and PDF work runs in the thread pool.

        Args:
            reference: Document to extract

        Returns:
            Document: Extracted text with owner and size

        Raises:
            ExtractionError: When download or parsing fails
        """
        return await run_in_threadpool(self._extract_sync, reference)

    def _extract_sync(self, reference: DocumentReference) -> Document:
        local_path: str | None = None
        try:
            local_path, size = self._download_task.download(reference.file_path)
            text = self._parsing_task.parse(local_path)
        except (S3DownloadError, ParsingError) as e:
            logger.error(
                "%s:extract - %s: %s",
                __name__,
                type(e).__name__,
                e,
                extra={"file_path": reference.file_path},
            )
            raise ExtractionError(
                f"Error extracting text: {e}",
                document_name=reference.name,
                file_path=reference.file_path,
            ) from e
        finally:
            if local_path:
                shutil.rmtree(os.path.dirname(local_path), ignore_errors=True)

        return Document(
            document_id=reference.file_path,
            owner_id=reference.owner_id,
            name=reference.name,
            text=text,
            size_bytes=size,
        )
