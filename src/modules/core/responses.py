"""Response envelope ``{success, data?, message?}`` and status mapping."""

from __future__ import annotations

from typing import Any, Dict

import structlog
from rest_framework import status
from rest_framework.response import Response

from modules.core.exceptions import (
    CatalogError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

_OMIT: Any = object()

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def envelope(success: bool, data: Any = _OMIT, message: str | None = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    if data is not _OMIT:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return body


def success_response(
    data: Any = _OMIT,
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    return Response(envelope(True, data, message), status=status_code)


def failure_response(message: str, status_code: int) -> Response:
    return Response(envelope(False, message=message), status=status_code)


def status_for(exc: CatalogError) -> int:
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: CatalogError, failure_message: str) -> Response:
    """Map a domain exception to its envelope.

    Store failures never leak their cause: the caller gets
    ``failure_message`` and the real error goes to the log.
    """
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request.failed", message=failure_message, error=exc.message)
        return failure_response(failure_message, status_code)
    return failure_response(exc.message, status_code)
