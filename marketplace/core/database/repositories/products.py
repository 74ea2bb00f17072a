"""
Product repository implementation.

This module provides data access operations for product listings, including
the owner-joined lookups used to build API responses. Built exclusively on
SQLModel for type-safe ORM operations.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.product_categories import ProductCategory
from ..entities.products import Product
from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder

ProductWithOwner = Tuple[Product, Optional[User]]


class ProductRepository(AsyncBaseRepository[Product]):
    """Repository for product data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Product)

    async def create(self, product: Product) -> Product:
        """Insert a new product listing.

        Args:
            product: Product SQLModel instance

        Returns:
            Persisted Product with generated fields
        """
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        return product

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by its ID.

        Args:
            product_id: Product ID

        Returns:
            Product instance or None
        """
        stmt = select(Product).where(Product.id == product_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_owner(self, product_id: int) -> Optional[ProductWithOwner]:
        """Get a product together with the user that created it.

        The owner is outer-joined, so a product whose owner row is missing
        is still returned with ``None`` in the owner slot.

        Args:
            product_id: Product ID

        Returns:
            ``(product, owner)`` tuple or None when the product does not exist
        """
        stmt = (
            select(Product, User)
            .join(User, Product.created_by == User.id, isouter=True)
            .where(Product.id == product_id)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def list_with_owner(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        owner_id: Optional[int] = None,
    ) -> List[ProductWithOwner]:
        """List products with their owners, newest id first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            owner_id: Only return products created by this user

        Returns:
            List of ``(product, owner)`` tuples
        """
        stmt = select(Product, User).join(User, Product.created_by == User.id, isouter=True)
        stmt = QueryBuilder.apply_filters(stmt, Product, {"created_by": owner_id})
        stmt = stmt.order_by(Product.id.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def update(self, product: Product) -> Product:
        """Persist changed attributes of a loaded product.

        Args:
            product: Product instance with updated fields

        Returns:
            Updated Product instance
        """
        product.updated_at = utc_now()
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        return product

    async def delete(self, product_id: int) -> bool:
        """Delete product by its ID.

        Args:
            product_id: Product ID to delete

        Returns:
            True if deleted, False if not found
        """
        product = await self.get_by_id(product_id)
        if product:
            links = await self.session.execute(
                select(ProductCategory).where(ProductCategory.product_id == product_id)
            )
            for link in links.scalars().all():
                await self.session.delete(link)
            await self.session.delete(product)
            await self.session.commit()
            return True
        return False

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Product]:
        """List products with optional pagination, newest id first.

        Args:
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of Product instances
        """
        stmt = select(Product).order_by(Product.id.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
