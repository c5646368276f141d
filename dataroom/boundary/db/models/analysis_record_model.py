"""
Analysis record ORM model.

One row per (owner, document name) holding the latest merged analysis.

Dependencies: sqlalchemy, dataroom.boundary.db.base
System role: Persistent storage for document analyses
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dataroom.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now
from dataroom.core.document_analysis.models import RecordStatus


class AnalysisRecordModel(Base, UUIDMixin, TimestampMixin):
    """
    Stored document entry with its merged analysis.

    Attributes:
        id: UUID primary key (auto-generated)
        owner_id: Owning user identifier
        name: Document name (last segment of the storage path)
        size: Human-readable file size, e.g. "1.2 MB"
        status: Record status (analyzing/completed/failed)
        upload_date: When the document entry was first created
        analysis: MergedAnalysis in camelCase wire form
        analysis_timestamp: When the analysis was last written

    Constraints:
        (owner_id, name): UNIQUE; re-analysis overwrites the row
    """

    __tablename__ = "analysis_records"
    __table_args__ = (UniqueConstraint("owner_id", "name", name="uq_analysis_records_owner_name"),)

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(1024), nullable=False)
    size: Mapped[str | None] = mapped_column(String(32), nullable=True)

    status: Mapped[RecordStatus] = mapped_column(
        Enum(RecordStatus, native_enum=False),
        nullable=False,
        default=RecordStatus.ANALYZING,
    )

    upload_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    analysis: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Merged analysis (camelCase keys)",
    )

    analysis_timestamp: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
