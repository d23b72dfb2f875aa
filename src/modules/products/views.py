"""Product API views."""

from __future__ import annotations

from modules.categories.repositories.sql_repository import CategorySQLRepository
from modules.core.views import ResourceViewSet
from modules.products.repositories.sql_repository import ProductSQLRepository
from modules.products.resources import PRODUCT
from modules.products.services import ProductService


class ProductViewSet(ResourceViewSet):
    definition = PRODUCT

    def build_service(self) -> ProductService:
        return ProductService(
            repository=ProductSQLRepository(),
            categories=CategorySQLRepository(),
        )
