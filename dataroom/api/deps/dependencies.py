"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: dataroom.configs, dataroom.application, dataroom.boundary, dataroom.core
System role: DI container for service injection
"""

from dataroom.application.services import AnalysisService
from dataroom.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._session_factory = None
        self._analysis_store = None
        self._analysis_pipeline = None

    @property
    def session_factory(self):
        """Get cached async session factory."""
        if self._session_factory is None:
            from dataroom.boundary.db.connection import get_async_session_factory

            self._session_factory = get_async_session_factory()
        return self._session_factory

    @property
    def analysis_store(self):
        """Get cached SQL analysis store."""
        if self._analysis_store is None:
            from dataroom.boundary.db.sql_store import SqlAnalysisStore

            self._analysis_store = SqlAnalysisStore(self.session_factory)
        return self._analysis_store

    @property
    def analysis_pipeline(self):
        """Get cached document analysis pipeline."""
        if self._analysis_pipeline is None:
            from dataroom.core.document_analysis.entrypoint import DocumentAnalysisPipeline

            self._analysis_pipeline = DocumentAnalysisPipeline(
                store=self.analysis_store,
                settings=get_settings(),
            )
        return self._analysis_pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_factory = None
        self._analysis_store = None
        self._analysis_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_analysis_service() -> AnalysisService:
    """
    Get analysis service instance.

    Returns:
        AnalysisService: Service bound to the cached pipeline and store
    """
    return AnalysisService(pipeline=get_service_cache().analysis_pipeline)
