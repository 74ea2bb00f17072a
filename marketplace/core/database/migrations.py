"""
Programmatic Alembic migration runner.

The server applies pending migrations on boot. The upgrade shares the
application's async engine: the connection is handed to ``env.py`` through
``Config.attributes`` and Alembic runs synchronously inside ``run_sync``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

from marketplace.core.logging_config import get_logger

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent.parent / "migrations"


def build_alembic_config(database_url: Optional[str] = None) -> Config:
    """Build an Alembic ``Config`` pointing at the bundled migration scripts.

    Args:
        database_url: Optional URL written to ``sqlalchemy.url``; when omitted
            ``env.py`` falls back to the application settings.

    Returns:
        Alembic configuration object
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    if database_url:
        cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


def _upgrade(connection: Connection, cfg: Config, revision: str) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, revision)


async def run_migrations(engine: AsyncEngine, revision: str = "head") -> None:
    """Upgrade the database behind ``engine`` to ``revision``.

    Args:
        engine: Async engine whose connection is shared with Alembic
        revision: Target revision, ``head`` by default
    """
    cfg = build_alembic_config()
    logger.info(f"Applying database migrations up to '{revision}'")
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade, cfg, revision)
    logger.info("Database migrations applied")
