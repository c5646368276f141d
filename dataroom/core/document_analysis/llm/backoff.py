"""
Rate-limit backoff policy.

One reusable retry policy for completion calls: bounded attempts and a
linearly increasing delay (retry n waits base_delay_ms * n * 2).

Dependencies: tenacity
System role: Retry scheduling for CompletionClient
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class BackoffPolicy:
    """
    Bounded retry schedule.

    Attributes:
        max_attempts: Total attempts including the first call
        base_delay_ms: Delay base in milliseconds
        sleep: Coroutine used to wait between attempts (swap in tests)
    """

    max_attempts: int = 3
    base_delay_ms: int = 1000
    sleep: SleepFn = field(default=asyncio.sleep, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.base_delay_ms < 0:
            raise ValueError(f"base_delay_ms must be >= 0, got {self.base_delay_ms}")

    def delay_for(self, retry_number: int) -> float:
        """Seconds to wait before retry number `retry_number` (1-indexed)."""
        return self.base_delay_ms * retry_number * 2 / 1000

    @property
    def schedule(self) -> list[float]:
        """All delays a persistently failing call will wait through."""
        return [self.delay_for(n) for n in range(1, self.max_attempts)]

    def retrying(
        self,
        retry_on: type[BaseException] | tuple[type[BaseException], ...],
        operation: str = "request",
    ) -> AsyncRetrying:
        """
        Build a tenacity AsyncRetrying bound to this schedule.

        Args:
            retry_on: Exception type(s) that trigger a retry
            operation: Label used in retry log lines

        Returns:
            AsyncRetrying: Re-raises the last exception once attempts run out
        """
        step = self.delay_for(1)

        def _log_retry(retry_state: RetryCallState) -> None:
            delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
            logger.warning(
                "%s:%s - Retry %s/%s after rate limit, waiting %.1fs",
                __name__,
                operation,
                retry_state.attempt_number,
                self.max_attempts - 1,
                delay,
            )

        return AsyncRetrying(
            retry=retry_if_exception_type(retry_on),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_incrementing(start=step, increment=step),
            sleep=self.sleep,
            before_sleep=_log_retry,
            reraise=True,
        )
