"""
Category API Endpoints.

Anyone may list categories; creating and deleting them requires the admin role.
"""

from typing import List

from fastapi import APIRouter, Query, Response, status

from marketplace.core.logging_config import get_logger
from marketplace.core.models.io import CategoryCreate, CategoryReturn
from marketplace.server.services.deps import AdminUserDep, CategoryServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[CategoryReturn],
    summary="List Categories",
    description="List all categories ordered by name.",
)
async def list_categories(
    categories: CategoryServiceDep,
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> List[CategoryReturn]:
    return await categories.list_categories(limit=limit, offset=offset)


@router.post(
    "",
    response_model=CategoryReturn,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    description="Create a category with a unique name. Admin only.",
    responses={
        201: {"description": "Category created"},
        403: {"description": "Caller is not an admin"},
        409: {"description": "Category name already exists"},
    },
)
async def create_category(body: CategoryCreate, admin: AdminUserDep, categories: CategoryServiceDep) -> CategoryReturn:
    logger.debug(f"Admin {admin.id} creating category '{body.category_name}'")
    return await categories.create_category(body)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Category",
    description="Delete a category and detach it from every product. Admin only.",
    responses={
        204: {"description": "Category deleted"},
        403: {"description": "Caller is not an admin"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(category_id: int, admin: AdminUserDep, categories: CategoryServiceDep) -> Response:
    logger.debug(f"Admin {admin.id} deleting category {category_id}")
    await categories.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
