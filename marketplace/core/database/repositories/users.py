"""
User repository implementation.

Data access for marketplace accounts: CRUD plus lookups by username and
email used by registration, login and admin seeding.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User SQLModel instance

        Returns:
            Persisted User with generated id and timestamps
        """
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username.

        Args:
            username: Login name

        Returns:
            User instance or None
        """
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        stmt = select(func.count()).select_from(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def email_exists(self, email: str) -> bool:
        stmt = select(func.count()).select_from(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def update(self, user: User) -> User:
        """Persist changed attributes of a loaded user.

        Args:
            user: User instance with updated fields

        Returns:
            Updated User instance
        """
        user.updated_at = utc_now()
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def delete(self, user_id: int) -> bool:
        user = await self.get_by_id(user_id)
        if user:
            await self.session.delete(user)
            await self.session.commit()
            return True
        return False

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[User]:
        """List users ordered by id.

        Args:
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of User instances
        """
        stmt = select(User).order_by(User.id)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
