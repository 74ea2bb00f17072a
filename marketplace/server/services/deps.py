"""
Service Dependencies.

Builds per-request services on top of the request's database session and
resolves the authenticated user from the ``Authorization`` header.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.database import get_session
from marketplace.core.database.repositories.bundle import SqlRepoBundle, build_sql_repos_from_session

from .category_service import CategoryService
from .errors import NotAllowedError, UnauthorizedError
from .product_service import ProductService
from .user_service import AuthUser, UserService

bearer_scheme = HTTPBearer(auto_error=False)


def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


def get_user_service(repos: SqlRepoBundle = Depends(get_repos)) -> UserService:
    return UserService(repos)


def get_product_service(repos: SqlRepoBundle = Depends(get_repos)) -> ProductService:
    return ProductService(repos)


def get_category_service(repos: SqlRepoBundle = Depends(get_repos)) -> CategoryService:
    return CategoryService(repos)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


async def get_current_user(
    users: UserServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthUser:
    """Resolve the bearer token to the authenticated user.

    Raises:
        UnauthorizedError: Missing, invalid or expired token
    """
    if credentials is None:
        raise UnauthorizedError()
    return await users.get_authenticated_user(credentials.credentials)


CurrentUserDep = Annotated[AuthUser, Depends(get_current_user)]


async def require_admin(user: CurrentUserDep) -> AuthUser:
    if not user.is_admin:
        raise NotAllowedError("Admin role required")
    return user


AdminUserDep = Annotated[AuthUser, Depends(require_admin)]
