"""API-specific dependencies."""

from .dependencies import (
    get_analysis_service,
    get_service_cache,
)

__all__ = [
    "get_analysis_service",
    "get_service_cache",
]
