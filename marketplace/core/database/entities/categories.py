"""
Category entity models.

Categories are a flat, admin-managed vocabulary. Products are linked to
categories through the ``product_category`` association table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, IdType, TimestampType, utc_now


class CategoryBase(Base):
    """Base fields for a category."""

    category_name: str = Field(max_length=128, unique=True, description="Unique category name")


class Category(CategoryBase, table=True):
    """Persistent product category.

    Table: category
    """

    __tablename__ = "category"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    created_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name={self.category_name})"
