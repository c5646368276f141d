"""
Test suite for DocumentAnalysisPipeline.

System role: Verification of pipeline assembly from settings
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from dataroom.configs import Settings
from dataroom.configs.analysis import AnalysisSettings, ChunkFailurePolicy
from dataroom.core.document_analysis import DocumentAnalysisPipeline, InMemoryAnalysisStore
from dataroom.core.document_analysis.models import DocumentReference, JobState
from dataroom.core.exceptions import ParseFailureError


@pytest.fixture
def settings() -> Settings:
    return Settings(analysis=AnalysisSettings(max_chunk_chars=10, chunk_failure_policy=ChunkFailurePolicy.SKIP))


@pytest.fixture
def completion_client() -> MagicMock:
    client = MagicMock()
    client.complete = AsyncMock()
    return client


@pytest.fixture
def pipeline(settings, mock_extractor, completion_client) -> DocumentAnalysisPipeline:
    return DocumentAnalysisPipeline(
        store=InMemoryAnalysisStore(),
        settings=settings,
        extractor=mock_extractor,
        completion_client=completion_client,
    )


class TestDocumentAnalysisPipeline:
    """Test suite for job creation and end-to-end analysis."""

    def test_create_job_should_apply_configured_policy(self, pipeline):
        job = pipeline.create_job(DocumentReference(file_path="users/u-1/pdfs/deck.pdf", owner_id="u-1"))

        snapshot = job.snapshot()
        assert snapshot.state is JobState.PENDING
        assert snapshot.failure_policy is ChunkFailurePolicy.SKIP

    @pytest.mark.asyncio
    async def test_analyze_should_use_configured_chunk_size(self, pipeline, completion_client, make_analysis):
        completion_client.complete.side_effect = [
            make_analysis(summary="first"),
            ParseFailureError("bad"),
            make_analysis(summary="last"),
        ]

        merged = await pipeline.analyze("users/u-1/pdfs/deck.pdf", "u-1")

        assert completion_client.complete.await_count == 3
        assert merged.summary == "last"
        record = await pipeline.store.get_analysis("u-1", "deck.pdf")
        assert record.analysis == merged

    @pytest.mark.asyncio
    async def test_reanalysis_should_overwrite_record(self, pipeline, completion_client, make_analysis):
        completion_client.complete.return_value = make_analysis(summary="v1")
        await pipeline.analyze("users/u-1/pdfs/deck.pdf", "u-1")
        first = await pipeline.store.get_analysis("u-1", "deck.pdf")

        completion_client.complete.return_value = make_analysis(summary="v2")
        await pipeline.analyze("users/u-1/pdfs/deck.pdf", "u-1")
        second = await pipeline.store.get_analysis("u-1", "deck.pdf")

        assert second.analysis.summary == "v2"
        assert second.upload_date == first.upload_date
        assert second.analysis_timestamp >= first.analysis_timestamp
