"""
Exception hierarchy for the data room analysis service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, plus the
error kind reported to callers in the error envelope.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Caller-facing error classification used in error envelopes."""

    INVALID_ARGUMENT = "invalid-argument"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not-found"
    RESOURCE_EXHAUSTED = "resource-exhausted"
    INTERNAL = "internal"


class DataRoomException(Exception):
    """Base exception for all data room application errors."""

    error_kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DataRoomException):
    """Raised when input validation fails."""

    error_kind = ErrorKind.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnauthenticatedError(DataRoomException):
    """Raised when a request carries no caller identity."""

    error_kind = ErrorKind.UNAUTHENTICATED


class AnalysisNotFoundError(DataRoomException):
    """Raised when no analysis record exists for an owner/document pair."""

    error_kind = ErrorKind.NOT_FOUND

    def __init__(self, owner_id: str, document_name: str) -> None:
        super().__init__(
            f"No analysis found for document: {document_name}",
            {"owner_id": owner_id, "document_name": document_name},
        )


class AnalysisError(DataRoomException):
    """Base exception for document analysis pipeline errors."""

    def __init__(
        self,
        message: str,
        document_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize analysis error.

        Args:
            message: Error message
            document_name: Name of the document being analyzed
            details: Additional context
        """
        details = details or {}
        if document_name:
            details["document_name"] = document_name
        super().__init__(message, details)


class ExtractionError(AnalysisError):
    """Raised when text cannot be obtained from the document."""

    def __init__(
        self,
        message: str,
        document_name: str | None = None,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, document_name, details)


class ChunkAnalysisError(AnalysisError):
    """Base exception for failures analyzing a single chunk."""

    def __init__(
        self,
        message: str,
        attempts: int = 1,
        chunk_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chunk analysis error.

        Args:
            message: Error message
            attempts: Completion attempts made before giving up
            chunk_index: Index of the failed chunk (set by the job)
            details: Additional context
        """
        details = details or {}
        details["attempts"] = attempts
        self.attempts = attempts
        self.chunk_index = chunk_index
        if chunk_index is not None:
            details["chunk_index"] = chunk_index
        super().__init__(message, details=details)

    def for_chunk(self, chunk_index: int) -> "ChunkAnalysisError":
        """Attach the chunk index once the job knows which chunk failed."""
        self.chunk_index = chunk_index
        self.details["chunk_index"] = chunk_index
        return self


class RateLimitedError(ChunkAnalysisError):
    """Raised when the completion service keeps answering 429 after all retries."""

    error_kind = ErrorKind.RESOURCE_EXHAUSTED


class UpstreamError(ChunkAnalysisError):
    """Raised on any non rate-limit failure response from the completion service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        attempts: int = 1,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        self.status_code = status_code
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, attempts=attempts, details=details)


class ParseFailureError(ChunkAnalysisError):
    """Raised when completion content does not match the analysis schema."""

    pass


class PersistenceError(AnalysisError):
    """Raised when the merged analysis cannot be written to the store."""

    pass


class InvalidStateTransitionError(AnalysisError):
    """Raised when an analysis job is driven through an illegal transition."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            f"Illegal job transition: {current} -> {target}",
            details={"current": current, "target": target},
        )
