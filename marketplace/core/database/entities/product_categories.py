"""
Product/category association entity.

One category has many ``ProductCategory`` rows; each row links it to a single
product. Rows disappear together with either side.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, IdType


class ProductCategory(Base, table=True):
    """Link between a product and a category.

    Table: product_category
    """

    __tablename__ = "product_category"
    __table_args__ = (
        UniqueConstraint("product_id", "category_id", name="uq_product_category_pair"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)
    product_id: int = Field(sa_type=IdType, foreign_key="product.id", ondelete="CASCADE", index=True)
    category_id: int = Field(sa_type=IdType, foreign_key="category.id", ondelete="CASCADE", index=True)
