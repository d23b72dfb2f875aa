"""Persistence interfaces (Dependency Inversion Principle).

- ``ISQLGateway``: executes parameterized SQL and returns rows as dicts.
- ``IRepository``: the per-resource contract the Service Layer depends on.

Service-layer code depends on these abstractions, never on Django's
database connection directly, so tests can plug in an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ContextManager, Dict, List, Optional, Sequence

Row = Dict[str, Any]


class ISQLGateway(ABC):
    """Runs one parameterized statement at a time against the store."""

    @abstractmethod
    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Row]:
        """Execute ``sql`` and return every row produced."""

    @abstractmethod
    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
        """Execute ``sql`` and return the first row, or ``None``."""

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Context manager running the enclosed statements in one transaction."""

    @property
    @abstractmethod
    def supports_row_locks(self) -> bool:
        """Whether ``SELECT ... FOR UPDATE`` is available on this backend."""


class IRepository(ABC):
    """Base repository contract shared by every catalog resource."""

    @abstractmethod
    def list(self) -> List[Row]:
        """Return every row in the resource's default order."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Row]:
        """Retrieve a row by primary key."""

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> Row:
        """Insert a row and return it as stored."""

    @abstractmethod
    def update(self, id: int, fields: Dict[str, Any]) -> Optional[Row]:
        """Apply a partial update; ``None`` when no row matched."""

    @abstractmethod
    def delete(self, id: int) -> Optional[Row]:
        """Remove a row and return it; ``None`` when no row matched."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Whether a row with this primary key exists."""

    @abstractmethod
    def lock_for_update(self, id: int) -> Optional[Row]:
        """Read a row, holding a row lock until the transaction ends."""

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Transaction scope for multi-statement operations."""
