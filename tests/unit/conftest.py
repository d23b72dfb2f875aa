"""In-memory repositories standing in for the SQL store in service tests."""

from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

from modules.categories.repositories.interfaces import ICategoryRepository
from modules.categories.resources import CATEGORY
from modules.core.resources import ResourceDefinition
from modules.core.sql import build_insert, build_update
from modules.products.repositories.interfaces import IProductRepository
from modules.products.resources import PRODUCT


class InMemoryRepository:
    """Dict-backed rows with the same write contract as the SQL repository.

    Writes go through the real statement builders first, so empty or
    non-allow-listed updates fail exactly as they would against the store.
    """

    definition: ResourceDefinition

    def __init__(self) -> None:
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.writes = 0
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def list(self) -> List[Dict[str, Any]]:
        return [dict(row) for row in self.rows.values()]

    def get_by_id(self, id: int) -> Optional[Dict[str, Any]]:
        row = self.rows.get(id)
        return dict(row) if row else None

    def exists(self, id: int) -> bool:
        return id in self.rows

    def lock_for_update(self, id: int) -> Optional[Dict[str, Any]]:
        return self.get_by_id(id)

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        build_insert(self.definition.table, fields, self.definition.mutable_columns)
        now = self._now()
        row = {"id": self._next_id, **fields, "created_at": now, "updated_at": now}
        self.rows[self._next_id] = row
        self._next_id += 1
        self.writes += 1
        return dict(row)

    def update(self, id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        build_update(
            self.definition.table,
            id,
            fields,
            self.definition.mutable_columns,
            empty_message=self.definition.empty_update_message,
        )
        row = self.rows.get(id)
        if row is None:
            return None
        row.update(fields, updated_at=self._now())
        self.writes += 1
        return dict(row)

    def delete(self, id: int) -> Optional[Dict[str, Any]]:
        row = self.rows.pop(id, None)
        if row is not None:
            self.writes += 1
        return row

    def atomic(self):
        return nullcontext()


class InMemoryCategoryRepository(InMemoryRepository, ICategoryRepository):
    definition = CATEGORY

    def __init__(self) -> None:
        super().__init__()
        self.products: Optional[InMemoryProductRepository] = None

    def count_products(self, category_id: int) -> int:
        if self.products is None:
            return 0
        return sum(
            1 for row in self.products.rows.values()
            if row["category_id"] == category_id
        )


class InMemoryProductRepository(InMemoryRepository, IProductRepository):
    definition = PRODUCT


@pytest.fixture()
def category_repo() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@pytest.fixture()
def product_repo(category_repo) -> InMemoryProductRepository:
    repo = InMemoryProductRepository()
    category_repo.products = repo
    return repo
