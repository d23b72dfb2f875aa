"""Product service layer (Use Cases).

Generic create/update/delete from ``ResourceService`` plus one rule:
a ``category_id`` being written must reference an existing category.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

import structlog

from modules.core.exceptions import ValidationError
from modules.core.services import ResourceService
from modules.products.resources import PRODUCT

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService(ResourceService):
    """Application service for Product use-cases.

    Receives the product repository and the category repository (used
    for the ``category_id`` existence check) via constructor injection.
    """

    def __init__(
        self, repository: IProductRepository, categories: IRepository
    ) -> None:
        super().__init__(PRODUCT, repository)
        self._categories = categories

    def check_references(self, fields: Dict[str, Any]) -> None:
        """Raises ``ValidationError`` if ``category_id`` names no category."""
        if "category_id" not in fields:
            return
        category_id = fields["category_id"]
        if not self._categories.exists(category_id):
            logger.warning("product.unknown_category", category_id=category_id)
            raise ValidationError("Category does not exist")
