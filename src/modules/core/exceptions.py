"""Catalog domain exceptions.

Raised by the Service Layer and the Persistence Gateway.  The API layer
(``ResourceViewSet``) catches these and translates them into the response
envelope:

- ``ValidationError``  -> 400
- ``NotFoundError``    -> 404
- ``ConflictError``    -> 400
- ``PersistenceError`` -> 500 (fixed, operation-specific message)
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every failure the API knows how to report."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Client input breaks a contract rule (missing name, empty update...)."""


class NotFoundError(CatalogError):
    """The target row does not exist."""


class ConflictError(CatalogError):
    """A referential rule blocks the operation (category still in use)."""


class PersistenceError(CatalogError):
    """The store failed.  The message is logged, never shown to callers."""
