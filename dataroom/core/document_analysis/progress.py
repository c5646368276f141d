"""
Progress reporting for analysis jobs.

Observers receive a completed fraction in [0, 1] after every processed
chunk. Reporting is advisory and never affects job outcome.

Dependencies: logging (stdlib)
System role: Decoupled progress callbacks
"""

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ProgressObserver(Protocol):
    """Receives job progress updates."""

    def on_progress(self, fraction: float) -> None: ...


class NullProgressObserver:
    """Discards progress updates."""

    def on_progress(self, fraction: float) -> None:
        return None


class LoggingProgressObserver:
    """Logs progress updates for one job."""

    def __init__(self, job_id: str) -> None:
        self._job_id = job_id

    def on_progress(self, fraction: float) -> None:
        logger.info(
            "%s:on_progress - %.0f%% analyzed",
            __name__,
            fraction * 100,
            extra={"job_id": self._job_id, "progress": fraction},
        )
