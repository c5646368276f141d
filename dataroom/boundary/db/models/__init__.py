"""
Database models package.

Exports:
  - AnalysisRecordModel: Stored document analysis
"""

from dataroom.boundary.db.models.analysis_record_model import AnalysisRecordModel

__all__ = ["AnalysisRecordModel"]
