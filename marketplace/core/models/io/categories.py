"""Category I/O models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .base import CamelModel


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    category_name: str = Field(min_length=1, max_length=128)


class CategoryReturn(CamelModel):
    """Schema for reading a category."""

    id: int
    category_name: str
