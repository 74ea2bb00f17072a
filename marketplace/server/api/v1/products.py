"""
Product API Endpoints.

CRUD for product listings plus category attachment. Reads are public;
writes need a bearer token, and updates/deletes are restricted to the
listing's owner.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from marketplace.core.logging_config import get_logger
from marketplace.core.models.io import CategoryReturn, CreatedId, ProductDetails, ProductReturn, ProductSummary
from marketplace.server.services.deps import CurrentUserDep, ProductServiceDep

logger = get_logger(__name__)

router = APIRouter()

_ERROR_BODY = {
    "content": {"application/json": {"example": {"error": "message"}}},
}


@router.post(
    "",
    response_model=CreatedId,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    description="Create a product listing owned by the caller.",
    responses={
        201: {"description": "Product created"},
        401: {"description": "Missing or invalid token", **_ERROR_BODY},
    },
)
async def create_product(body: ProductDetails, user: CurrentUserDep, products: ProductServiceDep) -> CreatedId:
    """
    Create a product listing.

    The caller becomes the owner; ownership never changes afterwards.
    """
    return CreatedId(id=await products.create_new_product(body, user))


@router.get(
    "",
    response_model=List[ProductSummary],
    summary="List Products",
    description="List product listings, newest first, optionally filtered by owner. Listings whose owner no longer exists are omitted.",
)
async def list_products(
    products: ProductServiceDep,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    owner_id: Optional[int] = Query(default=None, alias="ownerId"),
) -> List[ProductSummary]:
    return await products.list_products(limit=limit, offset=offset, owner_id=owner_id)


@router.get(
    "/{product_id}",
    response_model=ProductReturn,
    summary="Get Product",
    description="Read a product listing together with its owner.",
    responses={
        200: {"description": "Product found"},
        404: {"description": "Product not found", **_ERROR_BODY},
    },
)
async def get_product(product_id: int, products: ProductServiceDep) -> ProductReturn:
    return await products.get_product_by_id(product_id)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update Product",
    description="Replace every mutable field of a product listing. Owner only.",
    responses={
        204: {"description": "Product updated"},
        403: {"description": "Caller is not the owner", **_ERROR_BODY},
        404: {"description": "Product not found", **_ERROR_BODY},
    },
)
async def update_product(
    product_id: int, body: ProductDetails, user: CurrentUserDep, products: ProductServiceDep
) -> Response:
    await products.update_product_by_id(product_id, body, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    description="Permanently delete a product listing. Owner only.",
    responses={
        204: {"description": "Product deleted"},
        403: {"description": "Caller is not the owner", **_ERROR_BODY},
        404: {"description": "Product not found", **_ERROR_BODY},
    },
)
async def delete_product(product_id: int, user: CurrentUserDep, products: ProductServiceDep) -> Response:
    await products.delete_product_by_id(product_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{product_id}/categories",
    response_model=List[CategoryReturn],
    summary="List Product Categories",
)
async def list_product_categories(product_id: int, products: ProductServiceDep) -> List[CategoryReturn]:
    return await products.list_categories(product_id)


@router.put(
    "/{product_id}/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Attach Category",
    description="Attach a category to a product listing. Owner only; attaching twice is a no-op.",
)
async def attach_category(
    product_id: int, category_id: int, user: CurrentUserDep, products: ProductServiceDep
) -> Response:
    await products.add_category(product_id, category_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Detach Category",
    description="Detach a category from a product listing. Owner only.",
)
async def detach_category(
    product_id: int, category_id: int, user: CurrentUserDep, products: ProductServiceDep
) -> Response:
    await products.remove_category(product_id, category_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
