"""Unit tests for admin seeding at startup."""

import pytest

from marketplace.core.database.entities import User
from marketplace.core.database.repositories.users import UserRepository
from marketplace.core.models.domain.enums import Role
from marketplace.server.core.config import AdminConfig
from marketplace.server.services.seeding import AdminSeedError, seed_admin

pytestmark = pytest.mark.asyncio

ADMIN = AdminConfig(email="admin@example.com", password="bootstrap-pass")


class TestSeedAdmin:
    async def test_creates_admin_on_empty_database(self, session_factory):
        assert await seed_admin(session_factory, ADMIN) is True

        async with session_factory() as session:
            admin = await UserRepository(session).get_by_username("admin")

        assert admin is not None
        assert admin.email == "admin@example.com"
        assert admin.is_admin is True

    async def test_second_run_is_a_no_op(self, session_factory):
        await seed_admin(session_factory, ADMIN)

        assert await seed_admin(session_factory, ADMIN) is False

        async with session_factory() as session:
            admins = [user for user in await UserRepository(session).list() if user.is_admin]
        assert len(admins) == 1

    async def test_missing_credentials_fail(self, session_factory):
        with pytest.raises(AdminSeedError):
            await seed_admin(session_factory, AdminConfig(email=None, password=None))

    async def test_missing_credentials_ignored_when_admin_exists(self, session_factory):
        await seed_admin(session_factory, ADMIN)

        assert await seed_admin(session_factory, AdminConfig()) is False

    async def test_promotes_admin_account_left_with_user_role(self, session_factory):
        async with session_factory() as session:
            session.add(
                User(username="admin", email="admin@example.com", password_hash="hash", role=Role.user.value)
            )
            await session.commit()

        assert await seed_admin(session_factory, AdminConfig()) is True

        async with session_factory() as session:
            accounts = [user for user in await UserRepository(session).list() if user.username == "admin"]
        assert len(accounts) == 1
        assert accounts[0].is_admin is True
        assert await seed_admin(session_factory, AdminConfig()) is False
