"""
User and authentication service.

Registration, login, role assignment and the username lookups used
by admin seeding. Also resolves a bearer token to the authenticated user
consumed by the product service for ownership checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError

from marketplace.core.database.entities.users import User
from marketplace.core.database.repositories.bundle import SqlRepoBundle
from marketplace.core.logging_config import get_logger
from marketplace.core.models.domain.enums import Role
from marketplace.core.models.io.users import TokenReturn, UserRegister, UserReturn
from marketplace.server.core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

from .errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    translate_store_errors,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthUser:
    """The user behind the current request's access token."""

    user: User

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin


class UserService:
    """User account operations over a per-request repository bundle."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos
        self.session = repos.session

    async def username_exists(self, username: str) -> bool:
        async with translate_store_errors(self.session):
            return await self.repos.users.username_exists(username)

    async def get_by_username(self, username: str) -> Optional[User]:
        async with translate_store_errors(self.session):
            return await self.repos.users.get_by_username(username)

    async def create_user(self, register: UserRegister) -> int:
        """Register a new account with the ``user`` role.

        Args:
            register: Username, email and plain-text password

        Returns:
            Id of the new user

        Raises:
            ConflictError: If the username or email is already taken
        """
        async with translate_store_errors(self.session):
            if await self.repos.users.username_exists(register.username):
                raise ConflictError(f"Username '{register.username}' is already taken")
            if await self.repos.users.email_exists(register.email):
                raise ConflictError(f"Email '{register.email}' is already registered")

            user = User(
                username=register.username,
                email=register.email,
                password_hash=hash_password(register.password),
                role=Role.user.value,
            )
            try:
                created = await self.repos.users.create(user)
            except IntegrityError as exc:
                # Lost a race with a concurrent registration.
                await self.session.rollback()
                raise ConflictError("Username or email is already taken") from exc

        logger.info(f"Registered user {created.id} ({created.username})")
        return created.id

    async def authenticate(self, username: str, password: str) -> User:
        """Check credentials.

        Raises:
            UnauthorizedError: If the username is unknown or the password is wrong
        """
        async with translate_store_errors(self.session):
            user = await self.repos.users.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info(f"Rejected login for '{username}'")
            raise UnauthorizedError("Invalid username or password")
        return user

    async def login(self, username: str, password: str) -> TokenReturn:
        user = await self.authenticate(username, password)
        return TokenReturn(access_token=create_access_token(str(user.id)))

    async def get_authenticated_user(self, token: str) -> AuthUser:
        """Resolve a bearer token to its user.

        Raises:
            UnauthorizedError: If the token is invalid or its user no longer exists
        """
        try:
            token_data = decode_access_token(token)
            user_id = int(token_data.sub)
        except (InvalidTokenError, ValueError) as exc:
            raise UnauthorizedError(str(exc) or "Invalid token") from exc

        async with translate_store_errors(self.session):
            user = await self.repos.users.get_by_id(user_id)
        if user is None:
            raise UnauthorizedError("Invalid token")
        return AuthUser(user=user)

    async def get_user(self, user_id: int) -> UserReturn:
        async with translate_store_errors(self.session):
            user = await self.repos.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found")
        return UserReturn.model_validate(user)

    async def update_role_for_user(self, user_id: int, role: Role) -> None:
        """Assign ``role`` to a user.

        Raises:
            NotFoundError: If the user does not exist
        """
        async with translate_store_errors(self.session):
            user = await self.repos.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError(f"User with id {user_id} not found")
            user.role = role.value
            await self.repos.users.update(user)
        logger.info(f"User {user_id} role set to '{role.value}'")
