"""Product repository interface.

Products keep the base ``IRepository`` contract; ``list`` and
``get_by_id`` rows additionally carry the referenced ``category_name``.
"""

from __future__ import annotations

from modules.core.repositories.interfaces import IRepository


class IProductRepository(IRepository):
    """Repository contract for products."""
