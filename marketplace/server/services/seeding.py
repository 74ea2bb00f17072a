"""
Startup admin seeding.

Ensures the ``admin`` account exists. Runs once per boot after migrations;
a second run finds the account and does nothing.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.database.repositories.bundle import build_sql_repos_from_session
from marketplace.core.logging_config import get_logger
from marketplace.core.models.domain.enums import ADMIN_USERNAME, Role
from marketplace.core.models.io.users import UserRegister
from marketplace.server.core.config import AdminConfig

from .user_service import UserService

logger = get_logger(__name__)


class AdminSeedError(RuntimeError):
    """The admin account is missing and cannot be created."""


async def seed_admin(session_factory: async_sessionmaker[AsyncSession], admin: AdminConfig) -> bool:
    """Create the admin account if it does not exist yet.

    An ``admin`` account left with the ``user`` role (a previous run that
    created it but failed to promote it) is promoted without needing the
    credentials again.

    Args:
        session_factory: Factory for the session used by the seeding run
        admin: Credentials read from ``ADMIN_EMAIL`` / ``ADMIN_PASSWORD``

    Returns:
        True if an admin account was created or promoted, False if it already existed

    Raises:
        AdminSeedError: If the admin is missing and the credentials are not configured
    """
    async with session_factory() as session:
        users = UserService(build_sql_repos_from_session(session=session))

        existing = await users.get_by_username(ADMIN_USERNAME)
        if existing is not None:
            if existing.is_admin:
                logger.info("Admin account found; skipping seeding")
                return False
            logger.warning(f"Account '{ADMIN_USERNAME}' (id {existing.id}) lacks the admin role; promoting it")
            await users.update_role_for_user(existing.id, Role.admin)
            return True

        logger.info("No admin found -- Seeding new admin")
        if not admin.email or not admin.password:
            raise AdminSeedError("ADMIN_EMAIL and ADMIN_PASSWORD must be set to seed the admin account")

        user_id = await users.create_user(
            UserRegister(username=ADMIN_USERNAME, email=admin.email, password=admin.password)
        )
        await users.update_role_for_user(user_id, Role.admin)
        logger.info(f"Seeded admin account with id {user_id}")
        return True
