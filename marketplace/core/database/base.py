"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# BIGSERIAL on PostgreSQL; SQLite only auto-increments INTEGER PRIMARY KEY.
IdType = BigInteger().with_variant(Integer(), "sqlite")

# TIMESTAMPTZ on PostgreSQL; values must carry tzinfo.
TimestampType = DateTime(timezone=True)


def utc_now() -> datetime:
    """Get the current time in UTC.

    Returns:
        Timezone-aware datetime with ``tzinfo=timezone.utc``
    """
    return datetime.now(timezone.utc)


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
