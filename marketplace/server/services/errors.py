"""
Service error types.

Every service failure is one of a small closed set of exceptions. Each class
carries the HTTP status it maps to and whether its message is safe to show
to clients. Store and unknown failures are never exposed.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.logging_config import get_logger

logger = get_logger(__name__)


class ServiceError(Exception):
    """Base class for all service failures."""

    status_code: int = 500
    expose: bool = False
    default_message: str = "An unknown error occurred"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class StoreError(ServiceError):
    """The database or ORM layer failed."""

    default_message = "A database error occurred"


class UnknownError(ServiceError):
    """A row could not be mapped to its response shape."""


class NotFoundError(ServiceError):
    status_code = 404
    expose = True
    default_message = "Resource not found"


class NotAllowedError(ServiceError):
    status_code = 403
    expose = True
    default_message = "You are not allowed to perform this action"


class ConflictError(ServiceError):
    status_code = 409
    expose = True
    default_message = "Resource already exists"


class UnauthorizedError(ServiceError):
    status_code = 401
    expose = True
    default_message = "Not authenticated"


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found")


class ProductNotAllowedError(NotAllowedError):
    default_message = "You are not authorized to perform changes on this product"


@asynccontextmanager
async def translate_store_errors(session: AsyncSession) -> AsyncIterator[None]:
    """Roll back and re-raise ``SQLAlchemyError`` as ``StoreError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Database operation failed: {exc}", exc_info=True)
        await session.rollback()
        raise StoreError() from exc
