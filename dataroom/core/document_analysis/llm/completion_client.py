"""
Completion client for chunk analysis.

Sends CompletionRequests to an OpenAI-compatible chat completions endpoint,
retries rate-limited calls through BackoffPolicy and decodes the answer into
a schema-validated ChunkAnalysis.

Failure mapping:
- 429 after all attempts -> RateLimitedError
- any other error status or transport failure -> UpstreamError (never retried)
- missing, malformed or schema-violating content -> ParseFailureError

Dependencies: openai, tenacity (via BackoffPolicy), pydantic
System role: LLM boundary of the analysis pipeline (stateless)
"""

import logging
from collections.abc import Callable

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from dataroom.configs.completion import CompletionSettings
from dataroom.core.exceptions import ParseFailureError, RateLimitedError, UpstreamError

from ..models import ChunkAnalysis, CompletionRequest
from .backoff import BackoffPolicy

logger = logging.getLogger(__name__)


class CompletionClient:
    """Structured-output completion client with rate-limit backoff."""

    def __init__(
        self,
        settings: CompletionSettings,
        client: AsyncOpenAI | None = None,
        backoff: BackoffPolicy | None = None,
    ) -> None:
        """
        Initialize completion client.

        Args:
            settings: Endpoint, credentials and retry configuration
            client: Optional preconfigured AsyncOpenAI client
            backoff: Optional retry policy (built from settings if None)
        """
        self._settings = settings
        # SDK-level retries are disabled; BackoffPolicy owns the schedule
        self._client = client or AsyncOpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            max_retries=0,
        )
        self._backoff = backoff or BackoffPolicy(
            max_attempts=settings.max_retries,
            base_delay_ms=settings.base_delay_ms,
        )

    @property
    def backoff(self) -> BackoffPolicy:
        return self._backoff

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._client.close()

    async def complete(
        self,
        request: CompletionRequest,
        on_attempt: Callable[[int], None] | None = None,
    ) -> ChunkAnalysis:
        """
        Run one completion and decode it.

        Args:
            request: Request built by PromptBuilder
            on_attempt: Called with the attempt number before every send

        Returns:
            ChunkAnalysis: Validated analysis

        Raises:
            RateLimitedError: Still rate limited after max attempts
            UpstreamError: Non rate-limit failure response
            ParseFailureError: Content missing or not matching the schema
        """
        attempts = 0
        response = None
        try:
            async for attempt in self._backoff.retrying(openai.RateLimitError, "complete"):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    if on_attempt is not None:
                        on_attempt(attempts)
                    response = await self._client.chat.completions.create(
                        **request.to_payload()
                    )
        except openai.RateLimitError as e:
            logger.error(
                "%s:complete - Rate limited after %s attempts",
                __name__,
                attempts,
            )
            raise RateLimitedError(
                f"Completion service rate limited after {attempts} attempts: {e.message}",
                attempts=attempts,
            ) from e
        except openai.APIStatusError as e:
            logger.error(
                "%s:complete - Upstream error %s: %s",
                __name__,
                e.status_code,
                e.message,
            )
            raise UpstreamError(e.message, status_code=e.status_code, attempts=attempts) from e
        except openai.APIConnectionError as e:
            logger.error("%s:complete - %s: %s", __name__, type(e).__name__, e)
            raise UpstreamError(
                f"Completion service unreachable: {e}",
                attempts=attempts,
            ) from e

        return self._parse(response, attempts)

    @staticmethod
    def _parse(response, attempts: int) -> ChunkAnalysis:
        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            raise ParseFailureError("Completion returned no message content", attempts=attempts)

        try:
            return ChunkAnalysis.model_validate_json(content)
        except ValidationError as e:
            logger.warning(
                "%s:_parse - Content failed schema validation: %s error(s)",
                __name__,
                e.error_count(),
            )
            raise ParseFailureError(
                f"Completion content does not match the analysis schema: {e.error_count()} error(s)",
                attempts=attempts,
                details={"errors": e.errors(include_url=False, include_input=False)},
            ) from e
