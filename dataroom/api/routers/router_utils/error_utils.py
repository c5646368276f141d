"""
Error envelope helpers.

Maps typed application errors to {errorKind, message} responses.

Dependencies: fastapi, dataroom.core.exceptions
System role: HTTP error translation
"""

from fastapi.responses import JSONResponse

from dataroom.core.exceptions import DataRoomException, ErrorKind
from dataroom.models import ErrorEnvelope

STATUS_BY_ERROR_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.RESOURCE_EXHAUSTED: 429,
    ErrorKind.INTERNAL: 500,
}


def error_response(exc: Exception) -> JSONResponse:
    """
    Build the error envelope response for an exception.

    Untyped exceptions are reported as internal errors.

    Args:
        exc: Raised exception

    Returns:
        JSONResponse: Envelope with the mapped HTTP status
    """
    if isinstance(exc, DataRoomException):
        kind = exc.error_kind
        message = exc.message
    else:
        kind = ErrorKind.INTERNAL
        message = f"Error analyzing document: {exc}"

    envelope = ErrorEnvelope(error_kind=kind.value, message=message)
    return JSONResponse(
        status_code=STATUS_BY_ERROR_KIND[kind],
        content=envelope.model_dump(by_alias=True),
    )
