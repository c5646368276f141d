"""
Collaborator contracts for AnalysisJob.

TextExtractor turns a document reference into text; AnalysisStore persists
and reads merged analyses keyed by (owner, document name). The in-memory
store backs local runs and tests; SqlAnalysisStore lives in the db boundary.

Dependencies: analysis models
System role: Seams between the analysis core and infrastructure
"""

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from .models import (
    AnalysisRecord,
    Document,
    DocumentReference,
    MergedAnalysis,
    RecordStatus,
)


@runtime_checkable
class TextExtractor(Protocol):
    """Extracts the text of an uploaded document."""

    async def extract(self, reference: DocumentReference) -> Document: ...


@runtime_checkable
class AnalysisStore(Protocol):
    """Key-value upsert/read API for analysis records."""

    async def upsert_analysis(
        self,
        owner_id: str,
        document_name: str,
        analysis: MergedAnalysis,
        size: str | None = None,
    ) -> AnalysisRecord: ...

    async def get_analysis(self, owner_id: str, document_name: str) -> AnalysisRecord | None: ...


class InMemoryAnalysisStore:
    """Process-local AnalysisStore; last writer wins per key."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], AnalysisRecord] = {}

    async def upsert_analysis(
        self,
        owner_id: str,
        document_name: str,
        analysis: MergedAnalysis,
        size: str | None = None,
    ) -> AnalysisRecord:
        now = datetime.now(timezone.utc)
        existing = self._records.get((owner_id, document_name))
        record = AnalysisRecord(
            owner_id=owner_id,
            name=document_name,
            size=size if size is not None else (existing.size if existing else None),
            status=RecordStatus.COMPLETED,
            upload_date=existing.upload_date if existing else now,
            analysis=analysis,
            analysis_timestamp=now,
        )
        self._records[(owner_id, document_name)] = record
        return record

    async def get_analysis(self, owner_id: str, document_name: str) -> AnalysisRecord | None:
        return self._records.get((owner_id, document_name))
