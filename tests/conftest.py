"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, analysis factories, pipeline fakes
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from dataroom.configs.completion import CompletionSettings
from dataroom.core.document_analysis.llm import BackoffPolicy
from dataroom.core.document_analysis.models import ChunkAnalysis, Document, Keyword


def build_chunk_analysis(**overrides) -> ChunkAnalysis:
    """ChunkAnalysis with small realistic defaults; override any field."""
    fields = {
        "summary": "A seed-stage company raising its first round.",
        "keywords": [Keyword(word="runway", explanation="Months of cash left")],
        "categories": ["Finance"],
        "tags": ["fundraising"],
        "key_insights": ["Burn rate halved year over year"],
        "tone_and_style": "Formal",
        "target_audience": "Investors",
        "potential_applications": ["Due diligence"],
    }
    fields.update(overrides)
    return ChunkAnalysis(**fields)


def completion_response(content: str | ChunkAnalysis | None) -> SimpleNamespace:
    """Object shaped like an openai ChatCompletion with one choice."""
    if isinstance(content, ChunkAnalysis):
        content = json.dumps(content.model_dump(by_alias=True))
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def make_analysis():
    return build_chunk_analysis


@pytest.fixture
def make_completion():
    return completion_response


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def completion_settings() -> CompletionSettings:
    """Completion settings that never touch the environment for credentials."""
    return CompletionSettings(api_key="test-key", max_retries=3, base_delay_ms=1000)


@pytest.fixture
def fast_backoff(recording_sleep: RecordingSleep) -> BackoffPolicy:
    return BackoffPolicy(max_attempts=3, base_delay_ms=1000, sleep=recording_sleep)


@pytest.fixture
def sample_document() -> Document:
    return Document(
        document_id="users/u-1/pdfs/deck.pdf",
        owner_id="u-1",
        name="deck.pdf",
        text="alpha beta gamma delta",
        size_bytes=2048,
    )


@pytest.fixture
def mock_extractor(sample_document: Document) -> AsyncMock:
    extractor = AsyncMock()
    extractor.extract = AsyncMock(return_value=sample_document)
    return extractor


@pytest.fixture
async def async_engine():
    """
    In-memory SQLite async engine with all tables created.

    Yields:
        AsyncEngine: Engine shared by every session of one test
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from dataroom.boundary.db.base import Base
    from dataroom.boundary.db.models import AnalysisRecordModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_async_db(session_factory):
    """
    Async session over the in-memory database.

    Yields:
        AsyncSession: Rolled back after the test
    """
    async with session_factory() as session:
        yield session
        await session.rollback()
