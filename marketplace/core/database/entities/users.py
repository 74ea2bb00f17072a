"""
User entity models.

This module contains the database entity for marketplace accounts. A user
owns products and carries a single authorization role.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from marketplace.core.models.domain.enums import Role

from ..base import Base, IdType, TimestampType, utc_now


class UserBase(Base):
    """Base fields for a user account."""

    username: str = Field(max_length=64, unique=True, index=True, description="Unique login name")
    email: str = Field(max_length=255, unique=True, description="Unique contact email")
    role: str = Field(default=Role.user.value, max_length=16, description="Authorization role")


class User(UserBase, table=True):
    """Persistent user account.

    Table: user
    """

    __tablename__ = "user"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    created_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType, sa_column_kwargs={"onupdate": utc_now})

    password_hash: str = Field(max_length=255, description="Argon2 password hash")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin.value

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role={self.role})"
