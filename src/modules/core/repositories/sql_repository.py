"""Raw-SQL implementation of ``IRepository``.

One class serves every catalog resource: the table, the mutable column
allow-list and the default ordering all come from the resource's
``ResourceDefinition``.  Each method issues exactly one parameterized
statement through the injected ``ISQLGateway``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ContextManager, Dict, List, Optional

import structlog

from modules.core.repositories.gateway import DjangoSQLGateway
from modules.core.repositories.interfaces import IRepository, ISQLGateway, Row
from modules.core.sql import build_delete, build_insert, build_update

if TYPE_CHECKING:
    from modules.core.resources import ResourceDefinition

logger = structlog.get_logger(__name__)


class SQLResourceRepository(IRepository):
    """Concrete repository issuing parameterized SQL for one resource."""

    def __init__(
        self,
        definition: ResourceDefinition,
        gateway: Optional[ISQLGateway] = None,
    ) -> None:
        self.definition = definition
        self.gateway = gateway or DjangoSQLGateway()

    @property
    def table(self) -> str:
        return self.definition.table

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Row]:
        return self.gateway.fetch_all(
            f"SELECT * FROM {self.table} ORDER BY {self.definition.ordering}"
        )

    def get_by_id(self, id: int) -> Optional[Row]:
        return self.gateway.fetch_one(
            f"SELECT * FROM {self.table} WHERE id = %s", [id]
        )

    def exists(self, id: int) -> bool:
        row = self.gateway.fetch_one(
            f"SELECT 1 AS found FROM {self.table} WHERE id = %s", [id]
        )
        return row is not None

    def lock_for_update(self, id: int) -> Optional[Row]:
        if not self.gateway.supports_row_locks:
            return self.gateway.fetch_one(
                f"SELECT * FROM {self.table} WHERE id = %s", [id]
            )
        return self.gateway.fetch_one(
            f"SELECT * FROM {self.table} WHERE id = %s FOR UPDATE", [id]
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, fields: Dict[str, Any]) -> Row:
        statement = build_insert(self.table, fields, self.definition.mutable_columns)
        row = self.gateway.fetch_one(statement.sql, statement.params)
        logger.info(f"{self.definition.key}.inserted", id=row["id"] if row else None)
        return row

    def update(self, id: int, fields: Dict[str, Any]) -> Optional[Row]:
        statement = build_update(
            self.table,
            id,
            fields,
            self.definition.mutable_columns,
            empty_message=self.definition.empty_update_message,
        )
        row = self.gateway.fetch_one(statement.sql, statement.params)
        logger.info(
            f"{self.definition.key}.row_updated",
            id=id,
            columns=list(fields),
            matched=row is not None,
        )
        return row

    def delete(self, id: int) -> Optional[Row]:
        statement = build_delete(self.table, id)
        row = self.gateway.fetch_one(statement.sql, statement.params)
        logger.info(f"{self.definition.key}.row_deleted", id=id, matched=row is not None)
        return row

    def atomic(self) -> ContextManager[None]:
        return self.gateway.atomic()
