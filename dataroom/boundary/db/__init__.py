"""
Database boundary layer: ORM models, CRUD operations, connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Connection management
  - AnalysisRecordModel: Stored document analysis
  - AnalysisRecordCRUD, analysis_record_crud: CRUD operations
  - SqlAnalysisStore: AnalysisStore implementation

Dependencies: sqlalchemy, dataroom.configs
System role: Persistent storage for document analyses
"""

from dataroom.boundary.db.base import Base, TimestampMixin, UUIDMixin
from dataroom.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from dataroom.boundary.db.CRUD import AnalysisRecordCRUD, BaseCRUD, analysis_record_crud
from dataroom.boundary.db.models import AnalysisRecordModel
from dataroom.boundary.db.sql_store import SqlAnalysisStore

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_engine",
    "get_async_session_factory",
    "AnalysisRecordModel",
    "BaseCRUD",
    "AnalysisRecordCRUD",
    "analysis_record_crud",
    "SqlAnalysisStore",
]
