"""Referential guard: block deleting a parent row that still has children."""

from __future__ import annotations

from typing import Optional

from modules.core.repositories.gateway import DjangoSQLGateway
from modules.core.repositories.interfaces import ISQLGateway


class ReferentialGuard:
    """Counts rows of ``child_table`` whose ``foreign_key`` points at a parent."""

    def __init__(
        self,
        child_table: str,
        foreign_key: str,
        gateway: Optional[ISQLGateway] = None,
    ) -> None:
        self.child_table = child_table
        self.foreign_key = foreign_key
        self.gateway = gateway or DjangoSQLGateway()

    def count_dependents(self, parent_id: int) -> int:
        row = self.gateway.fetch_one(
            f"SELECT COUNT(*) AS total FROM {self.child_table} "
            f"WHERE {self.foreign_key} = %s",
            [parent_id],
        )
        return int(row["total"]) if row else 0
