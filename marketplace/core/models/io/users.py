"""
User I/O models for API requests and responses.

This module contains Pydantic-based I/O schemas for registration, login,
role management and the minimal owner view embedded in product responses.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from marketplace.core.models.domain.enums import Role

from .base import CamelModel


class UserRegister(BaseModel):
    """Schema for registering a new account."""

    username: str = Field(min_length=1, max_length=64, description="Unique login name")
    email: str = Field(min_length=3, max_length=255, description="Unique contact email")
    password: str = Field(min_length=1, description="Plain-text password, hashed before storage")


class UserLogin(BaseModel):
    """Schema for exchanging credentials for an access token."""

    username: str
    password: str


class RoleUpdate(BaseModel):
    """Schema for assigning a role to a user."""

    role: Role


class MinUserReturnDto(CamelModel):
    """Minimal public view of a user."""

    id: int
    username: str


class UserReturn(MinUserReturnDto):
    """Full view of a user, returned to the user themselves and to admins."""

    email: str
    role: Role


class TokenReturn(CamelModel):
    """Bearer access token."""

    access_token: str
    token_type: str = "bearer"


class UsernameExists(CamelModel):
    exists: bool
