"""Category DTOs for the Service Layer.

- ``CreateCategoryDTO`` / ``UpdateCategoryDTO``: ``name`` is required on
  every write, trimmed, and must not be blank.
- ``CategoryOutputDTO``: row shape returned by the API.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.dtos import require_text

NAME_REQUIRED = "Category name is required"


class CreateCategoryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name", mode="before")
    @classmethod
    def name_must_not_be_blank(cls, v):
        return require_text(v, NAME_REQUIRED)


class UpdateCategoryDTO(CreateCategoryDTO):
    """Categories have a single mutable field, so an update is a rename."""


class CategoryOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime
