"""
Analysis job state machine.

Drives one document through extraction, chunking, per-chunk analysis,
merging and persistence:

    pending -> extracting -> chunking -> analyzing -> merging -> persisting -> completed

Any non-terminal state may move to failed. Chunks are analyzed strictly in
order; a chunk failure either aborts the job or is skipped, depending on
the configured ChunkFailurePolicy.

Dependencies: tasks, llm, store, progress, core exceptions
System role: Per-document orchestration unit
"""

import logging

from dataroom.configs.analysis import ChunkFailurePolicy
from dataroom.core.exceptions import (
    ChunkAnalysisError,
    InvalidStateTransitionError,
    PersistenceError,
)

from .llm import CompletionClient, PromptBuilder
from .models import (
    Chunk,
    ChunkAnalysis,
    ChunkOutcome,
    ChunkStatus,
    Document,
    DocumentReference,
    JobSnapshot,
    JobState,
    MergedAnalysis,
    format_file_size,
)
from .progress import NullProgressObserver, ProgressObserver
from .store import AnalysisStore, TextExtractor
from .tasks import ChunkingTask, MergingTask

logger = logging.getLogger(__name__)

_NEXT_STATE: dict[JobState, JobState] = {
    JobState.PENDING: JobState.EXTRACTING,
    JobState.EXTRACTING: JobState.CHUNKING,
    JobState.CHUNKING: JobState.ANALYZING,
    JobState.ANALYZING: JobState.MERGING,
    JobState.MERGING: JobState.PERSISTING,
    JobState.PERSISTING: JobState.COMPLETED,
}


class AnalysisJob:
    """
    One analysis run for one document.

    A job instance runs once; re-analysis creates a new job, and the store
    upsert overwrites the previous record for the same (owner, name).
    """

    def __init__(
        self,
        reference: DocumentReference,
        extractor: TextExtractor,
        chunker: ChunkingTask,
        prompt_builder: PromptBuilder,
        completion_client: CompletionClient,
        merger: MergingTask,
        store: AnalysisStore,
        failure_policy: ChunkFailurePolicy = ChunkFailurePolicy.ABORT,
        progress_observer: ProgressObserver | None = None,
    ) -> None:
        """
        Initialize analysis job.

        Args:
            reference: Document to analyze
            extractor: Text extraction collaborator
            chunker: Splits text into bounded chunks
            prompt_builder: Builds per-chunk completion requests
            completion_client: Runs completions with backoff
            merger: Folds chunk analyses
            store: Persists the merged record
            failure_policy: ABORT or SKIP on chunk failure
            progress_observer: Receives completed-chunk fractions
        """
        self._reference = reference
        self._extractor = extractor
        self._chunker = chunker
        self._prompt_builder = prompt_builder
        self._completion_client = completion_client
        self._merger = merger
        self._store = store
        self._failure_policy = failure_policy
        self._observer = progress_observer or NullProgressObserver()

        self._state = JobState.PENDING
        self._outcomes: list[ChunkOutcome] = []
        self._total_chunks = 0
        self._progress = 0.0
        self._error: Exception | None = None

    @property
    def job_id(self) -> str:
        return self._reference.name

    @property
    def state(self) -> JobState:
        return self._state

    @property
    def outcomes(self) -> list[ChunkOutcome]:
        return list(self._outcomes)

    @property
    def progress(self) -> float:
        return self._progress

    def snapshot(self) -> JobSnapshot:
        """Current job state, outcomes and progress."""
        return JobSnapshot(
            job_id=self.job_id,
            owner_id=self._reference.owner_id,
            state=self._state,
            failure_policy=self._failure_policy,
            total_chunks=self._total_chunks,
            progress=self._progress,
            outcomes=self.outcomes,
            error=str(self._error) if self._error else None,
        )

    async def run(self) -> MergedAnalysis:
        """
        Run the job to completion.

        Returns:
            MergedAnalysis: Persisted merged analysis

        Raises:
            InvalidStateTransitionError: Job already ran
            ExtractionError: Text could not be obtained
            ChunkAnalysisError: Chunk failed under the ABORT policy
            PersistenceError: Store upsert failed
        """
        if self._state is not JobState.PENDING:
            raise InvalidStateTransitionError(self._state.value, JobState.EXTRACTING.value)

        logger.info(
            "%s:run - Starting analysis",
            __name__,
            extra={
                "job_id": self.job_id,
                "owner_id": self._reference.owner_id,
                "failure_policy": self._failure_policy.value,
            },
        )

        try:
            self._advance(JobState.EXTRACTING)
            document = await self._extractor.extract(self._reference)

            self._advance(JobState.CHUNKING)
            chunks = self._chunker.split(document.text)
            self._total_chunks = len(chunks)

            self._advance(JobState.ANALYZING)
            results = await self._analyze_chunks(document, chunks)

            self._advance(JobState.MERGING)
            merged = self._merger.merge(results)

            self._advance(JobState.PERSISTING)
            await self._persist(document, merged)

            self._advance(JobState.COMPLETED)
        except Exception as e:
            self._fail(e)
            raise

        logger.info(
            "%s:run - Analysis completed",
            __name__,
            extra={
                "job_id": self.job_id,
                "chunk_count": self._total_chunks,
                "skipped_count": self.snapshot().skipped_count,
            },
        )
        return merged

    async def _analyze_chunks(self, document: Document, chunks: list[Chunk]) -> list[ChunkAnalysis]:
        results: list[ChunkAnalysis] = []

        if not chunks:
            logger.info("%s:_analyze_chunks - No text to analyze", __name__, extra={"job_id": self.job_id})
            self._report_progress(1.0)
            return results

        for chunk in chunks:
            request = self._prompt_builder.build(document.name, chunk.content)
            attempts: list[int] = []
            try:
                analysis = await self._completion_client.complete(request, on_attempt=attempts.append)
            except ChunkAnalysisError as e:
                e.for_chunk(chunk.index)
                aborting = self._failure_policy is ChunkFailurePolicy.ABORT
                self._outcomes.append(
                    ChunkOutcome(
                        index=chunk.index,
                        status=ChunkStatus.FAILED if aborting else ChunkStatus.SKIPPED,
                        attempts=e.attempts,
                        error_kind=e.error_kind.value,
                        error_message=e.message,
                    )
                )
                logger.warning(
                    "%s:_analyze_chunks - Chunk %s failed (%s): %s",
                    __name__,
                    chunk.index,
                    type(e).__name__,
                    e.message,
                    extra={"job_id": self.job_id, "policy": self._failure_policy.value},
                )
                if aborting:
                    raise
            else:
                results.append(analysis)
                self._outcomes.append(
                    ChunkOutcome(
                        index=chunk.index,
                        status=ChunkStatus.SUCCEEDED,
                        attempts=attempts[-1] if attempts else None,
                    )
                )

            self._report_progress(len(self._outcomes) / len(chunks))

        if not results:
            logger.warning(
                "%s:_analyze_chunks - Every chunk was skipped; merging an empty analysis",
                __name__,
                extra={"job_id": self.job_id, "chunk_count": len(chunks)},
            )
        return results

    async def _persist(self, document: Document, merged: MergedAnalysis) -> None:
        try:
            await self._store.upsert_analysis(
                document.owner_id,
                document.name,
                merged,
                size=format_file_size(document.size_bytes),
            )
        except Exception as e:
            raise PersistenceError(
                f"Failed to persist analysis: {e}",
                document_name=document.name,
            ) from e

    def _advance(self, target: JobState) -> None:
        if _NEXT_STATE.get(self._state) is not target:
            raise InvalidStateTransitionError(self._state.value, target.value)
        logger.debug(
            "%s:_advance - %s -> %s",
            __name__,
            self._state.value,
            target.value,
            extra={"job_id": self.job_id},
        )
        self._state = target

    def _fail(self, error: Exception) -> None:
        self._error = error
        if self._state.is_terminal:
            return
        logger.error(
            "%s:run - Failed during %s: %s: %s",
            __name__,
            self._state.value,
            type(error).__name__,
            error,
            extra={"job_id": self.job_id},
        )
        self._state = JobState.FAILED

    def _report_progress(self, fraction: float) -> None:
        self._progress = fraction
        try:
            self._observer.on_progress(fraction)
        except Exception as e:
            logger.warning(
                "%s:_report_progress - Observer raised %s: %s",
                __name__,
                type(e).__name__,
                e,
                extra={"job_id": self.job_id},
            )
