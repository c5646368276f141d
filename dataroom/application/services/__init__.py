"""Application services."""

from dataroom.application.services.analysis_service import AnalysisService

__all__ = ["AnalysisService"]
