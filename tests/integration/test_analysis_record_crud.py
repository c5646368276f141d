"""
Test suite for AnalysisRecordCRUD and SqlAnalysisStore.

Runs against in-memory SQLite via aiosqlite.

System role: Verification of analysis record persistence
"""

import asyncio

import pytest
from sqlalchemy import func, select

from dataroom.boundary.db.CRUD.analysis_record_crud import AnalysisRecordCRUD
from dataroom.boundary.db.models import AnalysisRecordModel
from dataroom.boundary.db.sql_store import SqlAnalysisStore
from dataroom.core.document_analysis import AnalysisStore
from dataroom.core.document_analysis.models import Keyword, MergedAnalysis, RecordStatus


async def _row_count(session) -> int:
    result = await session.execute(select(func.count()).select_from(AnalysisRecordModel))
    return result.scalar_one()


@pytest.fixture
def crud() -> AnalysisRecordCRUD:
    return AnalysisRecordCRUD()


@pytest.fixture
def merged() -> MergedAnalysis:
    return MergedAnalysis(
        summary="Series A deck",
        keywords=[Keyword(word="ARR", explanation="Annual recurring revenue")],
        categories=["Finance"],
        key_insights=["ARR tripled"],
        tone_and_style="Formal",
        target_audience="Investors",
    )


class TestAnalysisRecordCRUD:
    """Test suite for AnalysisRecordCRUD."""

    def test_init_should_set_model(self) -> None:
        assert AnalysisRecordCRUD().model == AnalysisRecordModel

    @pytest.mark.asyncio
    async def test_upsert_should_create_row(self, crud, test_async_db, merged) -> None:
        payload = merged.model_dump(mode="json", by_alias=True)

        record = await crud.upsert_analysis(test_async_db, "u-1", "deck.pdf", payload, size="1.2 MB")

        assert record.id is not None
        assert record.status is RecordStatus.COMPLETED
        assert record.size == "1.2 MB"
        assert record.analysis["keyInsights"] == ["ARR tripled"]
        assert record.analysis_timestamp is not None

    @pytest.mark.asyncio
    async def test_upsert_should_merge_into_existing_row(self, crud, test_async_db, merged) -> None:
        first = await crud.upsert_analysis(test_async_db, "u-1", "deck.pdf", {"summary": "old"}, size="1.2 MB")
        first_id, first_upload = first.id, first.upload_date

        second = await crud.upsert_analysis(
            test_async_db, "u-1", "deck.pdf", merged.model_dump(mode="json", by_alias=True)
        )

        assert second.id == first_id
        assert second.upload_date == first_upload
        assert second.size == "1.2 MB"
        assert second.analysis["summary"] == "Series A deck"
        assert await _row_count(test_async_db) == 1

    @pytest.mark.asyncio
    async def test_records_are_keyed_by_owner_and_name(self, crud, test_async_db) -> None:
        await crud.upsert_analysis(test_async_db, "u-1", "deck.pdf", {})
        await crud.upsert_analysis(test_async_db, "u-2", "deck.pdf", {})
        await crud.upsert_analysis(test_async_db, "u-1", "memo.pdf", {})

        assert await _row_count(test_async_db) == 3
        assert await crud.get_by_owner_and_name(test_async_db, "u-1", "memo.pdf") is not None
        assert await crud.get_by_owner_and_name(test_async_db, "u-2", "memo.pdf") is None


class TestSqlAnalysisStore:
    """Test suite for SqlAnalysisStore."""

    def test_store_satisfies_protocol(self, session_factory) -> None:
        assert isinstance(SqlAnalysisStore(session_factory), AnalysisStore)

    @pytest.mark.asyncio
    async def test_round_trip_through_store(self, session_factory, merged) -> None:
        store = SqlAnalysisStore(session_factory)

        written = await store.upsert_analysis("u-1", "deck.pdf", merged, size="2.0 KB")
        read = await store.get_analysis("u-1", "deck.pdf")

        assert read is not None
        assert read.analysis == merged
        assert read.size == "2.0 KB"
        assert read.name == written.name == "deck.pdf"
        assert read.model_dump(by_alias=True)["analysis"]["toneAndStyle"] == "Formal"
        assert "ownerId" not in read.model_dump(by_alias=True)

    @pytest.mark.asyncio
    async def test_concurrent_writes_for_one_document_keep_one_row(self, session_factory, merged) -> None:
        store = SqlAnalysisStore(session_factory)
        other = MergedAnalysis(summary="Revised deck")

        results = await asyncio.gather(
            store.upsert_analysis("u-1", "deck.pdf", merged, size="2.0 KB"),
            store.upsert_analysis("u-1", "deck.pdf", other, size="2.0 KB"),
        )

        assert [r.name for r in results] == ["deck.pdf", "deck.pdf"]
        stored = await store.get_analysis("u-1", "deck.pdf")
        assert stored is not None
        assert stored.analysis in (merged, other)
        async with session_factory() as session:
            assert await _row_count(session) == 1

    @pytest.mark.asyncio
    async def test_missing_record_returns_none(self, session_factory) -> None:
        assert await SqlAnalysisStore(session_factory).get_analysis("u-1", "nope.pdf") is None

    @pytest.mark.asyncio
    async def test_failed_write_is_rolled_back(self, session_factory, merged) -> None:
        failing_crud = AnalysisRecordCRUD()

        async def _boom(*args, **kwargs):
            raise RuntimeError("constraint violated")

        failing_crud.upsert_analysis = _boom
        store = SqlAnalysisStore(session_factory, crud=failing_crud)

        with pytest.raises(RuntimeError):
            await store.upsert_analysis("u-1", "deck.pdf", merged)

        assert await store.get_analysis("u-1", "deck.pdf") is None


class TestCreateTables:
    """Test suite for schema creation helpers."""

    @pytest.mark.asyncio
    async def test_create_and_drop_are_idempotent(self, async_engine) -> None:
        from sqlalchemy import inspect

        from dataroom.boundary.db.create_tables import create_all_tables, drop_all_tables

        await create_all_tables(async_engine)
        async with async_engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert "analysis_records" in tables

        await drop_all_tables(async_engine)
        async with async_engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert tables == []
        await create_all_tables(async_engine)
