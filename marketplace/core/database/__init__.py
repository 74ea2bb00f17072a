"""
Centralized database layer for the marketplace backend.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer, one repository per aggregate
- migrations.py: Programmatic Alembic upgrade used at startup
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
]
