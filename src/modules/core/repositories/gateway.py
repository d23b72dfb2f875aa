"""Django-connection implementation of ``ISQLGateway``.

Statements run through ``connections[alias].cursor()``, so placeholders use
Django's portable ``%s`` style on every backend.  Any ``django.db.Error``
is logged with the statement that caused it and re-raised as a
``PersistenceError``; integrity failures keep their own subclass so callers
can recognise constraint violations.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence

import structlog

from django.db import DEFAULT_DB_ALIAS, Error, IntegrityError, connections, transaction

from modules.core.exceptions import PersistenceError
from modules.core.repositories.interfaces import ISQLGateway, Row

logger = structlog.get_logger(__name__)


class IntegrityViolation(PersistenceError):
    """The store rejected a write because of a unique or foreign-key constraint."""


def _translate(exc: Error, sql: str | None = None) -> PersistenceError:
    logger.error(
        "gateway.query_failed",
        error=str(exc),
        error_type=type(exc).__name__,
        sql=sql,
    )
    if isinstance(exc, IntegrityError):
        return IntegrityViolation(str(exc))
    return PersistenceError(str(exc))


class DjangoSQLGateway(ISQLGateway):
    """Concrete gateway backed by a configured Django database alias."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self._using = using

    @property
    def connection(self):
        return connections[self._using]

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Row]:
        try:
            with self.connection.cursor() as cursor:
                cursor.execute(sql, list(params))
                if cursor.description is None:
                    return []
                columns = [col[0] for col in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]
        except Error as exc:
            raise _translate(exc, sql) from exc

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
        rows = self.fetch_all(sql, params)
        return rows[0] if rows else None

    @contextmanager
    def atomic(self) -> Iterator[None]:
        # Deferred constraints are only checked on commit, i.e. when the
        # atomic block exits, so the translation has to wrap the block.
        try:
            with transaction.atomic(using=self._using):
                yield
        except Error as exc:
            raise _translate(exc) from exc

    @property
    def supports_row_locks(self) -> bool:
        return self.connection.features.has_select_for_update
