"""DRF exception handler rendering framework errors in the response envelope."""

from __future__ import annotations

from rest_framework.views import exception_handler

from modules.core.responses import envelope


def envelope_exception_handler(exc, context):
    """Wrap DRF's own errors (bad JSON, wrong method...) as ``{success, message}``.

    Anything DRF does not handle is left to Django (returns ``None``).
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = getattr(exc, "detail", None)
    message = detail if isinstance(detail, str) else "Invalid request"
    response.data = envelope(False, message=str(message))
    return response
