"""Helpers shared by the resource DTOs.

DTOs are Pydantic v2 models; this module turns their validation failures
into a single, readable ``ValidationError`` message for the envelope.
"""

from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)

# Range of the BIGINT primary and foreign keys.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

# Range of the INTEGER ``stock`` column.
MAX_STOCK = 2**31 - 1


def require_text(value: Any, message: str) -> Any:
    """Strip a text value, rejecting ``None`` and blank strings."""
    if value is None:
        raise ValueError(message)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError(message)
    return value


def describe_errors(exc: PydanticValidationError, resource: str) -> str:
    """Human-readable message for the first error Pydantic reported."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])

    if error["type"] == "missing":
        return f"{resource} {field} is required"
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    return f"{resource} {field} is invalid"


def validate_payload(dto_class: Type[M], payload: Any, resource: str) -> M:
    """Build ``dto_class`` from a request payload.

    Raises:
        ValidationError: if the payload is not an object or a field rule fails.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(f"{resource} payload must be a JSON object")
    try:
        return dto_class.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(describe_errors(exc, resource)) from exc


def decimal_text(value: Any) -> Any:
    """Pass floats to ``Decimal`` through their shortest repr (24.9, not 24.899...)."""
    if isinstance(value, float):
        return repr(value)
    return value
