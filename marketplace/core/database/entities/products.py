"""
Product entity models.

This module contains the database entity for product listings. Each listing
carries a price, a free-form location and a reference to the user who
created it. The owner reference is set once at creation and never rewritten.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field

from ..base import Base, IdType, TimestampType, utc_now


class ProductBase(Base):
    """Base fields for a product listing."""

    product_title: str = Field(max_length=255, description="Listing title")
    description: str = Field(description="Listing description")
    price: Decimal = Field(max_digits=12, decimal_places=2, description="Asking price")

    location_country: str = Field(max_length=128)
    location_state: str = Field(max_length=128)
    location_city: str = Field(max_length=128)
    location_zip: str = Field(max_length=32)
    location_latitude: Optional[Decimal] = Field(default=None, max_digits=9, decimal_places=6)
    location_longitude: Optional[Decimal] = Field(default=None, max_digits=9, decimal_places=6)


class Product(ProductBase, table=True):
    """Persistent product listing.

    Table: product
    """

    __tablename__ = "product"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    created_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType, sa_column_kwargs={"onupdate": utc_now})

    created_by: int = Field(sa_type=IdType, foreign_key="user.id", index=True, description="Owner user id")

    def __repr__(self) -> str:
        return f"Product(id={self.id}, title={self.product_title}, created_by={self.created_by})"
