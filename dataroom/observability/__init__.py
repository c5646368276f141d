"""
Observability module.

Provides logging configuration, safe structured-logging helpers,
correlation ID tracking and request middleware.
"""

from dataroom.observability.correlation import get_correlation_id, set_correlation_id
from dataroom.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
