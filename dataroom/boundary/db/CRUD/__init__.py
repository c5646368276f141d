"""
CRUD operations for database models.

Usage:
    from dataroom.boundary.db.CRUD import analysis_record_crud

    record = await analysis_record_crud.get_by_owner_and_name(db, owner_id, name)
"""

from dataroom.boundary.db.CRUD.analysis_record_crud import AnalysisRecordCRUD, analysis_record_crud
from dataroom.boundary.db.CRUD.base_crud import BaseCRUD

__all__ = ["BaseCRUD", "AnalysisRecordCRUD", "analysis_record_crud"]
