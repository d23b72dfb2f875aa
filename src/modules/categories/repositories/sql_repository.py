"""Raw-SQL Category repository."""

from __future__ import annotations

from typing import Optional

from modules.categories.repositories.interfaces import ICategoryRepository
from modules.categories.resources import CATEGORY
from modules.core.guards import ReferentialGuard
from modules.core.repositories.interfaces import ISQLGateway
from modules.core.repositories.sql_repository import SQLResourceRepository


class CategorySQLRepository(SQLResourceRepository, ICategoryRepository):
    """Categories table access; dependents are counted in ``products``."""

    def __init__(self, gateway: Optional[ISQLGateway] = None) -> None:
        super().__init__(CATEGORY, gateway)
        self.product_guard = ReferentialGuard(
            child_table="products", foreign_key="category_id", gateway=self.gateway
        )

    def count_products(self, category_id: int) -> int:
        return self.product_guard.count_dependents(category_id)
