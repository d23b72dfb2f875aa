"""Product schema.

Business rules implemented:
- ``category_id`` references ``categories.id`` (many-to-one, no cascade).
  ``PROTECT`` keeps the ORM from deleting a referenced category, and the
  category service refuses such deletes before they reach the store.
- ``stock`` defaults to 0 in the store, so raw inserts may omit it.
- Price must be greater than zero and stock non-negative (validated by
  the DTOs before any write).
"""

from __future__ import annotations

from django.db import models

from modules.categories.models import Category
from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    stock = models.IntegerField(db_default=0)
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.name
