"""Category schema.

Business rules:
- Names are unique and stored trimmed (trimming happens in the DTOs).
- A category cannot be deleted while a product references it; the
  ``products.category_id`` foreign key is declared ``PROTECT`` and the
  service layer checks dependents before deleting.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Category(TimestampedModel):
    name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
