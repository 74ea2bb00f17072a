"""Unit tests for category API endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

CATEGORIES = "/api/v1/categories"


class TestCategoriesApi:
    async def test_admin_creates_and_lists(self, client: AsyncClient, admin_headers):
        created = await client.post(CATEGORIES, json={"category_name": "Outdoor"}, headers=admin_headers)
        await client.post(CATEGORIES, json={"category_name": "Antiques"}, headers=admin_headers)

        assert created.status_code == 201
        assert created.json()["categoryName"] == "Outdoor"
        listed = await client.get(CATEGORIES)
        assert [c["categoryName"] for c in listed.json()] == ["Antiques", "Outdoor"]

    async def test_duplicate_conflicts(self, client: AsyncClient, admin_headers):
        await client.post(CATEGORIES, json={"category_name": "Outdoor"}, headers=admin_headers)

        response = await client.post(CATEGORIES, json={"category_name": "Outdoor"}, headers=admin_headers)

        assert response.status_code == 409

    async def test_regular_user_cannot_create(self, client: AsyncClient, register_and_login):
        alice = await register_and_login("alice")

        response = await client.post(CATEGORIES, json={"category_name": "Outdoor"}, headers=alice["headers"])

        assert response.status_code == 403

    async def test_admin_deletes(self, client: AsyncClient, admin_headers):
        category_id = (
            await client.post(CATEGORIES, json={"category_name": "Outdoor"}, headers=admin_headers)
        ).json()["id"]

        first = await client.delete(f"{CATEGORIES}/{category_id}", headers=admin_headers)
        second = await client.delete(f"{CATEGORIES}/{category_id}", headers=admin_headers)

        assert first.status_code == 204
        assert second.status_code == 404
