"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``); unknown keys sent by the client are ignored.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductOutputDTO``: output with all product fields.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modules.core.dtos import MAX_ID, MAX_STOCK, decimal_text, require_text

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


def _positive_price(v: Optional[Decimal]) -> Optional[Decimal]:
    if v is not None and v <= 0:
        raise ValueError("Product price must be greater than zero")
    return v


def _non_negative_stock(v: Optional[int]) -> Optional[int]:
    if v is not None and v < 0:
        raise ValueError("Product stock cannot be negative")
    return v


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is present and not blank (stored trimmed).
    - ``price`` is a Decimal greater than zero.
    - ``stock`` is non-negative, default 0.
    - ``category_id`` is present and fits the key column.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal = Field(max_digits=10, decimal_places=2)
    stock: int = Field(default=0, le=MAX_STOCK)
    category_id: int = Field(gt=0, le=MAX_ID)

    @field_validator("name", mode="before")
    @classmethod
    def name_must_not_be_blank(cls, v):
        return require_text(v, "Product name is required")

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float_repr(cls, v):
        return decimal_text(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _positive_price(v)

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        return _non_negative_stock(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated, but a
    supplied field may not be ``null``.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(default=None, le=MAX_STOCK)
    category_id: Optional[int] = Field(default=None, gt=0, le=MAX_ID)

    @field_validator("name", mode="before")
    @classmethod
    def name_must_not_be_blank(cls, v):
        if v is None:
            return v
        return require_text(v, "Product name cannot be blank")

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float_repr(cls, v):
        return decimal_text(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _positive_price(v)

    @field_validator("stock")
    @classmethod
    def stock_must_be_non_negative(cls, v: Optional[int]) -> Optional[int]:
        return _non_negative_stock(v)

    @model_validator(mode="after")
    def supplied_fields_not_null(self) -> UpdateProductDTO:
        for field in sorted(self.model_fields_set):
            if getattr(self, field) is None:
                raise ValueError(f"Product {field} cannot be null")
        return self


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses.

    ``category_name`` is only present on list/get results.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal
    stock: int
    category_id: Optional[int]
    category_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float_repr(cls, v):
        # SQLite hands NUMERIC columns back as floats.
        return decimal_text(v)
