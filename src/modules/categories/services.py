"""Category service layer.

Adds the referential rule on top of the generic resource operations:
a category cannot be deleted while any product references it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from modules.categories.resources import CATEGORY
from modules.core.exceptions import ConflictError, NotFoundError
from modules.core.repositories.gateway import IntegrityViolation
from modules.core.services import ResourceService, parse_id

if TYPE_CHECKING:
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.core.repositories.interfaces import Row

logger = structlog.get_logger(__name__)

IN_USE_MESSAGE = "Cannot delete category with associated products"


class CategoryService(ResourceService):
    def __init__(self, repository: ICategoryRepository) -> None:
        super().__init__(CATEGORY, repository)
        self._repo: ICategoryRepository = repository

    def can_delete(self, category_id: int) -> bool:
        """``False`` while at least one product references the category."""
        return self._repo.count_products(category_id) == 0

    def delete(self, raw_id: Any) -> Row:
        """Delete a category that no product references.

        The row lock, the dependent count and the delete run in one
        transaction, so a product cannot be attached in between.

        Raises:
            ConflictError: if products still reference the category.
            NotFoundError: if the category does not exist.
        """
        id = parse_id(raw_id)
        log = logger.bind(category_id=id)

        try:
            with self._repo.atomic():
                self._repo.lock_for_update(id)
                if not self.can_delete(id):
                    log.warning("category.delete_blocked")
                    raise ConflictError(IN_USE_MESSAGE)
                row = self._repo.delete(id)
        except IntegrityViolation as exc:
            log.warning("category.delete_blocked", reason="foreign_key")
            raise ConflictError(IN_USE_MESSAGE) from exc

        if row is None:
            raise NotFoundError(CATEGORY.not_found_message)
        log.info("category.deleted")
        return row
