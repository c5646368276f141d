"""
Analysis record CRUD operations.

Extends BaseCRUD with the (owner, name) lookup and the merge-style upsert
used when an analysis completes.

Dependencies: sqlalchemy, dataroom.boundary.db.models
System role: Analysis record persistence operations
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from dataroom.boundary.db.base import utc_now
from dataroom.boundary.db.CRUD.base_crud import BaseCRUD
from dataroom.boundary.db.models.analysis_record_model import AnalysisRecordModel
from dataroom.core.document_analysis.models import RecordStatus


class AnalysisRecordCRUD(BaseCRUD[AnalysisRecordModel]):
    """CRUD operations for AnalysisRecordModel."""

    def __init__(self) -> None:
        super().__init__(AnalysisRecordModel)

    async def get_by_owner_and_name(
        self,
        session: AsyncSession,
        owner_id: str,
        name: str,
    ) -> AnalysisRecordModel | None:
        """
        Retrieve the record for one document of one owner.

        Args:
            session: Async database session
            owner_id: Owning user
            name: Document name

        Returns:
            AnalysisRecordModel if found, None otherwise
        """
        return await self.get_one_by(session, owner_id=owner_id, name=name)

    async def upsert_analysis(
        self,
        session: AsyncSession,
        owner_id: str,
        name: str,
        analysis: dict[str, Any],
        size: str | None = None,
    ) -> AnalysisRecordModel:
        """
        Write an analysis, merging into an existing row.

        An existing row keeps its id, name, upload date and (unless a new
        value is given) size; analysis, status and analysis timestamp are
        overwritten. Concurrent writers for the same key do not conflict.
        Caller commits.

        Args:
            session: Async database session
            owner_id: Owning user
            name: Document name
            analysis: Merged analysis in wire form
            size: Human-readable size, if known

        Returns:
            The created or updated AnalysisRecordModel
        """
        now = utc_now()
        updates: dict[str, Any] = {
            "analysis": analysis,
            "status": RecordStatus.COMPLETED,
            "analysis_timestamp": now,
            "updated_at": now,
        }
        if size is not None:
            updates["size"] = size

        return await self.upsert(
            session,
            values={
                "owner_id": owner_id,
                "name": name,
                "size": size,
                "status": RecordStatus.COMPLETED,
                "upload_date": now,
                "analysis": analysis,
                "analysis_timestamp": now,
            },
            conflict_columns=["owner_id", "name"],
            update_values=updates,
        )


analysis_record_crud = AnalysisRecordCRUD()
