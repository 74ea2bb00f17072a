"""
Product I/O models for API requests and responses.

``ProductDetails`` is the create/update body and keeps snake_case keys;
``ProductReturn`` is the read shape and is serialized with camelCase keys.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .base import CamelModel
from .users import MinUserReturnDto


class ProductDetails(BaseModel):
    """Schema for creating or fully replacing a product listing."""

    description: str
    title: str = Field(max_length=255)
    price: Decimal = Field(max_digits=12, decimal_places=2)
    country: str = Field(max_length=128)
    state: str = Field(max_length=128)
    city: str = Field(max_length=128)
    zip: str = Field(max_length=32)
    latitude: Optional[Decimal] = Field(default=None, max_digits=9, decimal_places=6)
    longitude: Optional[Decimal] = Field(default=None, max_digits=9, decimal_places=6)


class ProductReturn(CamelModel):
    """Schema for reading a product listing."""

    title: str
    description: str
    price: float
    created_by: MinUserReturnDto


class ProductSummary(ProductReturn):
    """Listing entry; a ``ProductReturn`` plus the product id."""

    id: int
