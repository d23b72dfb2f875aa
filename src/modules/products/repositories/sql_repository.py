"""Raw-SQL Product repository.

Reads join ``categories`` so the SPA can show the category name next to
each product; writes return the bare ``products`` row.
"""

from __future__ import annotations

from typing import List, Optional

from modules.core.repositories.interfaces import ISQLGateway, Row
from modules.core.repositories.sql_repository import SQLResourceRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.resources import PRODUCT

SELECT_WITH_CATEGORY = (
    "SELECT p.*, c.name AS category_name "
    "FROM products p LEFT JOIN categories c ON c.id = p.category_id"
)


class ProductSQLRepository(SQLResourceRepository, IProductRepository):
    def __init__(self, gateway: Optional[ISQLGateway] = None) -> None:
        super().__init__(PRODUCT, gateway)

    def list(self) -> List[Row]:
        return self.gateway.fetch_all(
            f"{SELECT_WITH_CATEGORY} ORDER BY p.created_at DESC, p.id DESC"
        )

    def get_by_id(self, id: int) -> Optional[Row]:
        return self.gateway.fetch_one(f"{SELECT_WITH_CATEGORY} WHERE p.id = %s", [id])
