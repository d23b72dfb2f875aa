"""Abstract base models for the catalog schema.

Rows are written with raw SQL, not through the ORM, so defaults that
matter live in the store itself (``db_default``) rather than in Python.
"""

from __future__ import annotations

from django.db import models
from django.db.models.functions import Now


class TimestampedModel(models.Model):
    """Integer PK plus ``created_at`` / ``updated_at`` filled by the store clock.

    ``updated_at`` is refreshed by every dynamic ``UPDATE`` statement
    (``updated_at = CURRENT_TIMESTAMP``), never by ``save()``.
    """

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(db_default=Now())
    updated_at = models.DateTimeField(db_default=Now())

    class Meta:
        abstract = True
