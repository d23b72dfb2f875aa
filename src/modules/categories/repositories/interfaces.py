"""Category repository interface.

Extends ``IRepository`` with the dependent-product count needed to
enforce the "no delete while referenced" rule.
"""

from __future__ import annotations

from abc import abstractmethod

from modules.core.repositories.interfaces import IRepository


class ICategoryRepository(IRepository):
    """Repository contract for categories."""

    @abstractmethod
    def count_products(self, category_id: int) -> int:
        """Number of products referencing ``category_id``."""
