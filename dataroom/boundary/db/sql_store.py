"""
SQL-backed AnalysisStore.

Each call runs in its own session and transaction: commit on success,
rollback and re-raise on failure.

Dependencies: sqlalchemy, dataroom.boundary.db.CRUD
System role: AnalysisStore implementation over PostgreSQL
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from dataroom.boundary.db.CRUD.analysis_record_crud import AnalysisRecordCRUD, analysis_record_crud
from dataroom.boundary.db.models.analysis_record_model import AnalysisRecordModel
from dataroom.core.document_analysis.models import AnalysisRecord, MergedAnalysis

logger = logging.getLogger(__name__)


class SqlAnalysisStore:
    """AnalysisStore over an async session factory."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        crud: AnalysisRecordCRUD | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._crud = crud or analysis_record_crud

    async def upsert_analysis(
        self,
        owner_id: str,
        document_name: str,
        analysis: MergedAnalysis,
        size: str | None = None,
    ) -> AnalysisRecord:
        async with self._session_factory() as session:
            try:
                model = await self._crud.upsert_analysis(
                    session,
                    owner_id=owner_id,
                    name=document_name,
                    analysis=analysis.model_dump(mode="json", by_alias=True),
                    size=size,
                )
                await session.commit()
            except Exception as e:
                await session.rollback()
                logger.error(
                    "%s:upsert_analysis - %s: %s",
                    __name__,
                    type(e).__name__,
                    e,
                    extra={"owner_id": owner_id, "document_name": document_name},
                )
                raise

            logger.info(
                "%s:upsert_analysis - Analysis stored",
                __name__,
                extra={"owner_id": owner_id, "document_name": document_name},
            )
            return to_record(model)

    async def get_analysis(self, owner_id: str, document_name: str) -> AnalysisRecord | None:
        async with self._session_factory() as session:
            model = await self._crud.get_by_owner_and_name(session, owner_id, document_name)
            return to_record(model) if model else None


def to_record(model: AnalysisRecordModel) -> AnalysisRecord:
    """Convert an ORM row to the AnalysisRecord domain model."""
    return AnalysisRecord(
        owner_id=model.owner_id,
        name=model.name,
        size=model.size,
        status=model.status,
        upload_date=model.upload_date,
        analysis=MergedAnalysis.model_validate(model.analysis),
        analysis_timestamp=model.analysis_timestamp or model.upload_date,
    )
