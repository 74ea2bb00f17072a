"""Category management service."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from marketplace.core.database.entities.categories import Category
from marketplace.core.database.repositories.bundle import SqlRepoBundle
from marketplace.core.logging_config import get_logger
from marketplace.core.models.io.categories import CategoryCreate, CategoryReturn

from .errors import ConflictError, NotFoundError, translate_store_errors

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos
        self.session = repos.session

    async def list_categories(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[CategoryReturn]:
        async with translate_store_errors(self.session):
            categories = await self.repos.categories.list(limit=limit, offset=offset)
        return [CategoryReturn.model_validate(category) for category in categories]

    async def create_category(self, create: CategoryCreate) -> CategoryReturn:
        """Create a category with a unique name.

        Raises:
            ConflictError: A category with this name already exists
        """
        async with translate_store_errors(self.session):
            if await self.repos.categories.get_by_name(create.category_name) is not None:
                raise ConflictError(f"Category '{create.category_name}' already exists")
            try:
                category = await self.repos.categories.create(Category(category_name=create.category_name))
            except IntegrityError as exc:
                await self.session.rollback()
                raise ConflictError(f"Category '{create.category_name}' already exists") from exc
        logger.info(f"Created category {category.id} ({category.category_name})")
        return CategoryReturn.model_validate(category)

    async def delete_category(self, category_id: int) -> None:
        async with translate_store_errors(self.session):
            deleted = await self.repos.categories.delete(category_id)
        if not deleted:
            raise NotFoundError(f"Category with id {category_id} not found")
        logger.info(f"Deleted category {category_id}")
