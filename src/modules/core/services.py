"""Generic resource service layer (Use Cases).

``ResourceService`` orchestrates the five standard operations for any
catalog resource: validate the payload against the resource DTOs, filter it
down to the mutable-column allow-list, and delegate persistence to the
injected ``IRepository``.  Resource-specific rules (referential checks)
live in subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping

import structlog

from modules.core.dtos import MAX_ID, MIN_ID, validate_payload
from modules.core.exceptions import NotFoundError, PersistenceError, ValidationError

if TYPE_CHECKING:
    from pydantic import BaseModel

    from modules.core.repositories.interfaces import IRepository, Row
    from modules.core.resources import ResourceDefinition

logger = structlog.get_logger(__name__)


def parse_id(raw: Any) -> int:
    """Primary keys are BIGINT integers; anything else is a store-level failure."""
    try:
        id = int(str(raw))
    except (TypeError, ValueError) as exc:
        logger.warning("resource.malformed_id", raw_id=str(raw))
        raise PersistenceError(f"Malformed id: {raw!r}") from exc
    if not MIN_ID <= id <= MAX_ID:
        logger.warning("resource.malformed_id", raw_id=str(raw), reason="out_of_range")
        raise PersistenceError(f"Id out of range: {raw!r}")
    return id


class ResourceService:
    """Application service for one catalog resource.

    Receives an ``IRepository`` via constructor injection (DIP).
    """

    def __init__(self, definition: ResourceDefinition, repository: IRepository) -> None:
        self.definition = definition
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Row]:
        return self._repo.list()

    def get(self, raw_id: Any) -> Row:
        """Retrieve a single row by ID.

        Raises:
            NotFoundError: if no row has this ID.
        """
        row = self._repo.get_by_id(parse_id(raw_id))
        if row is None:
            raise NotFoundError(self.definition.not_found_message)
        return row

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, payload: Any) -> Row:
        """Validate ``payload`` and insert it.

        Raises:
            ValidationError: if a required field is missing or invalid.
        """
        dto = validate_payload(self.definition.create_dto, payload, self.definition.name)
        fields = dto.model_dump()
        self.check_references(fields)

        row = self._repo.create(fields)
        logger.info(f"{self.definition.key}.created", id=row["id"])
        return row

    def update(self, raw_id: Any, payload: Any) -> Row:
        """Apply a partial update with the supplied fields only.

        The payload is validated before the id is looked at, so a bad body
        is a 400 whatever the id.

        Raises:
            ValidationError: if a supplied value is invalid or no updatable
                field was supplied.
            NotFoundError: if no row has this ID.
        """
        dto = validate_payload(self.definition.update_dto, payload, self.definition.name)
        fields = self.changed_fields(payload, dto)
        if not fields:
            raise ValidationError(self.definition.empty_update_message)

        id = parse_id(raw_id)
        self.check_references(fields)

        row = self._repo.update(id, fields)
        if row is None:
            raise NotFoundError(self.definition.not_found_message)
        logger.info(f"{self.definition.key}.updated", id=id, columns=list(fields))
        return row

    def delete(self, raw_id: Any) -> Row:
        """Delete a row by ID.

        Raises:
            NotFoundError: if no row has this ID.
        """
        id = parse_id(raw_id)
        row = self._repo.delete(id)
        if row is None:
            raise NotFoundError(self.definition.not_found_message)
        logger.info(f"{self.definition.key}.deleted", id=id)
        return row

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def changed_fields(self, payload: Mapping[str, Any], dto: BaseModel) -> Dict[str, Any]:
        """Allow-listed fields the caller supplied, in the order received."""
        values = dto.model_dump()
        allowed = self.definition.mutable_columns
        fields = {
            key: values[key]
            for key in payload
            if key in allowed and key in dto.model_fields_set
        }
        ignored = [key for key in payload if key not in allowed]
        if ignored:
            logger.debug(f"{self.definition.key}.ignored_fields", fields=ignored)
        return fields

    def check_references(self, fields: Dict[str, Any]) -> None:
        """Verify foreign keys in ``fields``; no-op for resources without any."""
