"""
Document analysis pipeline entry point.

Wires extraction, chunking, prompt building, completion and merging from
Settings and hands out one AnalysisJob per document.

Dependencies: All task modules, llm, configs
System role: Pipeline assembly (coordinates only)
"""

import logging

from dataroom.configs import Settings, get_settings

from .job import AnalysisJob
from .llm import CompletionClient, PromptBuilder
from .models import DocumentReference, MergedAnalysis
from .progress import LoggingProgressObserver, ProgressObserver
from .store import AnalysisStore, TextExtractor
from .tasks import ChunkingTask, ExtractionTask, MergingTask, S3DownloadTask

logger = logging.getLogger(__name__)


class DocumentAnalysisPipeline:
    """Build and run analysis jobs: extract -> chunk -> analyze -> merge -> persist."""

    def __init__(
        self,
        store: AnalysisStore,
        settings: Settings | None = None,
        extractor: TextExtractor | None = None,
        completion_client: CompletionClient | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            store: Where merged analyses are persisted
            settings: Application settings (uses get_settings() if None)
            extractor: Text extractor (S3 + PDF extraction if None)
            completion_client: Completion client (built from settings if None)
        """
        self._settings = settings or get_settings()
        self._store = store

        self._extractor = extractor or ExtractionTask(
            S3DownloadTask(
                bucket=self._settings.storage.bucket,
                region=self._settings.storage.region,
            )
        )
        self._chunker = ChunkingTask(self._settings.analysis.max_chunk_chars)
        self._prompt_builder = PromptBuilder(model=self._settings.completion.model)
        self._completion_client = completion_client or CompletionClient(self._settings.completion)
        self._merger = MergingTask()

    @property
    def store(self) -> AnalysisStore:
        return self._store

    async def aclose(self) -> None:
        """Close the completion client's connections."""
        await self._completion_client.close()

    def create_job(
        self,
        reference: DocumentReference,
        progress_observer: ProgressObserver | None = None,
    ) -> AnalysisJob:
        """
        Create a fresh job for one document.

        Args:
            reference: Document to analyze
            progress_observer: Optional observer (logs progress if None)

        Returns:
            AnalysisJob: Job in the pending state
        """
        return AnalysisJob(
            reference,
            extractor=self._extractor,
            chunker=self._chunker,
            prompt_builder=self._prompt_builder,
            completion_client=self._completion_client,
            merger=self._merger,
            store=self._store,
            failure_policy=self._settings.analysis.chunk_failure_policy,
            progress_observer=progress_observer or LoggingProgressObserver(reference.name),
        )

    async def analyze(self, file_path: str, owner_id: str) -> MergedAnalysis:
        """
        Analyze one stored document end to end.

        Args:
            file_path: Storage key of the uploaded document
            owner_id: Owning user

        Returns:
            MergedAnalysis: Persisted merged analysis

        Raises:
            AnalysisError: Any typed pipeline failure
        """
        reference = DocumentReference(file_path=file_path, owner_id=owner_id)
        job = self.create_job(reference)
        return await job.run()
