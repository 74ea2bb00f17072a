"""
Category repository implementation.

Covers the ``category`` table and the ``product_category`` association rows
that link categories to products.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.categories import Category
from ..entities.product_categories import ProductCategory
from .base import AsyncBaseRepository, QueryBuilder


class CategoryRepository(AsyncBaseRepository[Category]):
    """Repository for category and product/category link operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def create(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.commit()
        await self.session.refresh(category)
        return category

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        stmt = select(Category).where(Category.id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, category_name: str) -> Optional[Category]:
        stmt = select(Category).where(Category.category_name == category_name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, category: Category) -> Category:
        category.updated_at = utc_now()
        self.session.add(category)
        await self.session.commit()
        await self.session.refresh(category)
        return category

    async def delete(self, category_id: int) -> bool:
        """Delete a category and its product links.

        Args:
            category_id: Category ID to delete

        Returns:
            True if deleted, False if not found
        """
        category = await self.get_by_id(category_id)
        if category is None:
            return False
        links = await self.session.execute(select(ProductCategory).where(ProductCategory.category_id == category_id))
        for link in links.scalars().all():
            await self.session.delete(link)
        await self.session.delete(category)
        await self.session.commit()
        return True

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Category]:
        stmt = select(Category).order_by(Category.category_name)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # product_category links
    # ------------------------------------------------------------------

    async def list_for_product(self, product_id: int) -> List[Category]:
        """Get categories attached to a product, ordered by name."""
        stmt = (
            select(Category)
            .join(ProductCategory, ProductCategory.category_id == Category.id)
            .where(ProductCategory.product_id == product_id)
            .order_by(Category.category_name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_link(self, product_id: int, category_id: int) -> Optional[ProductCategory]:
        stmt = select(ProductCategory).where(
            (ProductCategory.product_id == product_id) & (ProductCategory.category_id == category_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def link(self, product_id: int, category_id: int) -> ProductCategory:
        """Attach a category to a product; existing links are returned as-is."""
        existing = await self.get_link(product_id, category_id)
        if existing is not None:
            return existing
        link = ProductCategory(product_id=product_id, category_id=category_id)
        self.session.add(link)
        await self.session.commit()
        await self.session.refresh(link)
        return link

    async def unlink(self, product_id: int, category_id: int) -> bool:
        link = await self.get_link(product_id, category_id)
        if link is None:
            return False
        await self.session.delete(link)
        await self.session.commit()
        return True
