"""
Product Service.

Create, read, update and delete product listings. Reads join the owner and
map to ``ProductReturn``; updates and deletes are restricted to the user who
created the listing. The owner reference is never rewritten.
"""

from __future__ import annotations

from typing import List, Optional

from marketplace.core.database.entities.products import Product
from marketplace.core.database.entities.users import User
from marketplace.core.database.repositories.bundle import SqlRepoBundle
from marketplace.core.logging_config import get_logger
from marketplace.core.models.io.categories import CategoryReturn
from marketplace.core.models.io.products import ProductDetails, ProductReturn, ProductSummary
from marketplace.core.models.io.users import MinUserReturnDto

from .errors import (
    NotFoundError,
    ProductNotAllowedError,
    ProductNotFoundError,
    UnknownError,
    translate_store_errors,
)
from .user_service import AuthUser

logger = get_logger(__name__)


def _to_product_return(product: Product, owner: Optional[User]) -> ProductReturn:
    # A listing without a joined owner is reported as an unknown error.
    if owner is None:
        logger.error(f"Product {product.id} has no owner row for created_by={product.created_by}")
        raise UnknownError()
    try:
        price = float(product.price)
    except (TypeError, ValueError, ArithmeticError) as exc:
        logger.error(f"Product {product.id} has an unconvertible price {product.price!r}")
        raise UnknownError() from exc

    return ProductReturn(
        title=product.product_title,
        description=product.description,
        price=price,
        created_by=MinUserReturnDto(id=owner.id, username=owner.username),
    )


def _apply_details(product: Product, details: ProductDetails) -> None:
    product.product_title = details.title
    product.description = details.description
    product.price = details.price
    product.location_country = details.country
    product.location_state = details.state
    product.location_city = details.city
    product.location_zip = details.zip
    product.location_latitude = details.latitude
    product.location_longitude = details.longitude


class ProductService:
    """Product listing operations over a per-request repository bundle."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos
        self.session = repos.session

    async def create_new_product(self, create: ProductDetails, creating_user: AuthUser) -> int:
        """Insert a listing owned by ``creating_user``.

        Returns:
            Id of the new product
        """
        product = Product(created_by=creating_user.id)
        _apply_details(product, create)
        async with translate_store_errors(self.session):
            created = await self.repos.products.create(product)
        logger.info(f"User {creating_user.id} created product {created.id}")
        return created.id

    async def get_product_by_id(self, product_id: int) -> ProductReturn:
        """Read a listing with its owner.

        Raises:
            ProductNotFoundError: No product with this id
            UnknownError: The owner join is empty or the price cannot be converted
        """
        async with translate_store_errors(self.session):
            found = await self.repos.products.get_with_owner(product_id)
        if found is None:
            raise ProductNotFoundError(product_id)
        product, owner = found
        return _to_product_return(product, owner)

    async def list_products(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        owner_id: Optional[int] = None,
    ) -> List[ProductSummary]:
        """List product summaries, newest first.

        Rows whose owner no longer exists are left out of the page and
        logged; fetching such a product by id still fails.
        """
        async with translate_store_errors(self.session):
            rows = await self.repos.products.list_with_owner(limit=limit, offset=offset, owner_id=owner_id)
        summaries = []
        for product, owner in rows:
            if owner is None:
                logger.warning(f"Skipping product {product.id}: no owner row for created_by={product.created_by}")
                continue
            summaries.append(ProductSummary(id=product.id, **_to_product_return(product, owner).model_dump()))
        return summaries

    async def update_product_by_id(self, product_id: int, product: ProductDetails, user: AuthUser) -> None:
        """Overwrite every mutable field of a listing owned by ``user``.

        Raises:
            ProductNotFoundError: No product with this id
            ProductNotAllowedError: ``user`` is not the owner
        """
        db_product = await self.get_product_by_id(product_id)
        if db_product.created_by.id != user.id:
            logger.warning(f"User {user.id} tried to update product {product_id} owned by {db_product.created_by.id}")
            raise ProductNotAllowedError()

        async with translate_store_errors(self.session):
            active_product = await self.repos.products.get_by_id(product_id)
            if active_product is None:
                raise ProductNotFoundError(product_id)
            _apply_details(active_product, product)
            await self.repos.products.update(active_product)
        logger.info(f"User {user.id} updated product {product_id}")

    async def delete_product_by_id(self, product_id: int, user: AuthUser) -> None:
        """Delete a listing owned by ``user``.

        Raises:
            ProductNotFoundError: No product with this id
            ProductNotAllowedError: ``user`` is not the owner
        """
        async with translate_store_errors(self.session):
            product = await self.repos.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            if product.created_by != user.id:
                logger.warning(f"User {user.id} tried to delete product {product_id} owned by {product.created_by}")
                raise ProductNotAllowedError()
            await self.repos.products.delete(product_id)
        logger.info(f"User {user.id} deleted product {product_id}")

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self, product_id: int) -> List[CategoryReturn]:
        async with translate_store_errors(self.session):
            if await self.repos.products.get_by_id(product_id) is None:
                raise ProductNotFoundError(product_id)
            categories = await self.repos.categories.list_for_product(product_id)
        return [CategoryReturn.model_validate(category) for category in categories]

    async def _owned_product(self, product_id: int, user: AuthUser) -> Product:
        product = await self.repos.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if product.created_by != user.id:
            raise ProductNotAllowedError()
        return product

    async def add_category(self, product_id: int, category_id: int, user: AuthUser) -> None:
        """Attach a category to a listing owned by ``user``; idempotent."""
        async with translate_store_errors(self.session):
            await self._owned_product(product_id, user)
            if await self.repos.categories.get_by_id(category_id) is None:
                raise NotFoundError(f"Category with id {category_id} not found")
            await self.repos.categories.link(product_id, category_id)

    async def remove_category(self, product_id: int, category_id: int, user: AuthUser) -> None:
        """Detach a category from a listing owned by ``user``.

        Raises:
            NotFoundError: The category is not attached to the product
        """
        async with translate_store_errors(self.session):
            await self._owned_product(product_id, user)
            if not await self.repos.categories.unlink(product_id, category_id):
                raise NotFoundError(f"Category {category_id} is not attached to product {product_id}")
