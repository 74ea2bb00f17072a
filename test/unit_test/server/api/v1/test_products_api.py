"""
Unit tests for product API endpoints.

Runs the full FastAPI stack against in-memory SQLite. Covers the CRUD
flow, ownership enforcement, error bodies and category attachment.
"""

import pytest
from httpx import AsyncClient

API = "/api/v1"

pytestmark = pytest.mark.asyncio

PRODUCTS = f"{API}/products"


class TestCreateProduct:
    """Test POST /api/v1/products."""

    async def test_create_returns_id(self, client: AsyncClient, product_payload, register_and_login):
        """Creating a product returns 201 with the new id."""
        alice = await register_and_login("alice")

        response = await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])

        assert response.status_code == 201
        assert isinstance(response.json()["id"], int)

    async def test_create_requires_token(self, client: AsyncClient, product_payload):
        """Anonymous creation is rejected with 401."""
        response = await client.post(PRODUCTS, json=product_payload())

        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}

    async def test_create_rejects_bad_token(self, client: AsyncClient, product_payload):
        response = await client.post(PRODUCTS, json=product_payload(), headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    async def test_create_validates_body(self, client: AsyncClient, product_payload, register_and_login):
        """Prices with more than two decimals fail validation."""
        alice = await register_and_login("alice")

        response = await client.post(PRODUCTS, json=product_payload(price="1.234"), headers=alice["headers"])

        assert response.status_code == 422


class TestReadProduct:
    """Test GET /api/v1/products/{id} and the list endpoint."""

    async def test_get_returns_camel_case_view(self, client: AsyncClient, product_payload, register_and_login):
        alice = await register_and_login("alice")
        created = await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])
        product_id = created.json()["id"]

        response = await client.get(f"{PRODUCTS}/{product_id}")

        assert response.status_code == 200
        assert response.json() == {
            "title": "Road bike",
            "description": "Aluminium frame, 54cm, recently serviced",
            "price": 349.99,
            "createdBy": {"id": alice["id"], "username": "alice"},
        }

    async def test_get_missing_product(self, client: AsyncClient):
        """A missing product yields 404 with the error body."""
        response = await client.get(f"{PRODUCTS}/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Product with id 999 not found"}

    async def test_list_products(self, client: AsyncClient, product_payload, register_and_login):
        alice = await register_and_login("alice")
        bob = await register_and_login("bob")
        await client.post(PRODUCTS, json=product_payload(title="a1"), headers=alice["headers"])
        await client.post(PRODUCTS, json=product_payload(title="b1"), headers=bob["headers"])
        await client.post(PRODUCTS, json=product_payload(title="a2"), headers=alice["headers"])

        all_products = (await client.get(PRODUCTS)).json()
        alice_products = (await client.get(PRODUCTS, params={"ownerId": alice["id"]})).json()
        first_page = (await client.get(PRODUCTS, params={"limit": 1})).json()

        assert [p["title"] for p in all_products] == ["a2", "b1", "a1"]
        assert [p["title"] for p in alice_products] == ["a2", "a1"]
        assert len(first_page) == 1
        assert set(first_page[0]) == {"id", "title", "description", "price", "createdBy"}

    async def test_list_limit_is_bounded(self, client: AsyncClient):
        response = await client.get(PRODUCTS, params={"limit": 1000})

        assert response.status_code == 422


class TestUpdateProduct:
    """Test PUT /api/v1/products/{id}."""

    async def test_owner_updates(self, client: AsyncClient, product_payload, register_and_login):
        alice = await register_and_login("alice")
        product_id = (await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])).json()["id"]

        response = await client.put(
            f"{PRODUCTS}/{product_id}",
            json=product_payload(title="Gravel bike", price="410.00"),
            headers=alice["headers"],
        )

        assert response.status_code == 204
        product = (await client.get(f"{PRODUCTS}/{product_id}")).json()
        assert product["title"] == "Gravel bike"
        assert product["price"] == 410.0
        assert product["createdBy"]["id"] == alice["id"]

    async def test_non_owner_gets_403(self, client: AsyncClient, product_payload, register_and_login):
        """Another user cannot update, and the product stays unchanged."""
        alice = await register_and_login("alice")
        mallory = await register_and_login("mallory")
        product_id = (await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])).json()["id"]

        response = await client.put(
            f"{PRODUCTS}/{product_id}", json=product_payload(title="Stolen"), headers=mallory["headers"]
        )

        assert response.status_code == 403
        assert response.json() == {"error": "You are not authorized to perform changes on this product"}
        assert (await client.get(f"{PRODUCTS}/{product_id}")).json()["title"] == "Road bike"

    async def test_update_missing_product(self, client: AsyncClient, product_payload, register_and_login):
        alice = await register_and_login("alice")

        response = await client.put(f"{PRODUCTS}/42", json=product_payload(), headers=alice["headers"])

        assert response.status_code == 404


class TestDeleteProduct:
    """Test DELETE /api/v1/products/{id}."""

    async def test_owner_deletes(self, client: AsyncClient, product_payload, register_and_login):
        alice = await register_and_login("alice")
        product_id = (await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])).json()["id"]

        response = await client.delete(f"{PRODUCTS}/{product_id}", headers=alice["headers"])

        assert response.status_code == 204
        assert (await client.get(f"{PRODUCTS}/{product_id}")).status_code == 404

    async def test_non_owner_gets_403(self, client: AsyncClient, product_payload, register_and_login):
        alice = await register_and_login("alice")
        mallory = await register_and_login("mallory")
        product_id = (await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])).json()["id"]

        response = await client.delete(f"{PRODUCTS}/{product_id}", headers=mallory["headers"])

        assert response.status_code == 403
        assert (await client.get(f"{PRODUCTS}/{product_id}")).status_code == 200

    async def test_delete_requires_token(self, client: AsyncClient):
        response = await client.delete(f"{PRODUCTS}/1")

        assert response.status_code == 401


class TestProductCategories:
    """Test the /api/v1/products/{id}/categories endpoints."""

    async def test_attach_list_detach(self, client: AsyncClient, product_payload, register_and_login, admin_headers):
        alice = await register_and_login("alice")
        category = await client.post(f"{API}/categories", json={"category_name": "Bikes"}, headers=admin_headers)
        category_id = category.json()["id"]
        product_id = (await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])).json()["id"]
        url = f"{PRODUCTS}/{product_id}/categories"

        attach = await client.put(f"{url}/{category_id}", headers=alice["headers"])
        listed = await client.get(url)
        detach = await client.delete(f"{url}/{category_id}", headers=alice["headers"])
        detach_again = await client.delete(f"{url}/{category_id}", headers=alice["headers"])

        assert attach.status_code == 204
        assert listed.json() == [{"id": category_id, "categoryName": "Bikes"}]
        assert detach.status_code == 204
        assert detach_again.status_code == 404
        assert (await client.get(url)).json() == []

    async def test_non_owner_cannot_attach(
        self, client: AsyncClient, product_payload, register_and_login, admin_headers
    ):
        alice = await register_and_login("alice")
        mallory = await register_and_login("mallory")
        category_id = (
            await client.post(f"{API}/categories", json={"category_name": "Bikes"}, headers=admin_headers)
        ).json()["id"]
        product_id = (await client.post(PRODUCTS, json=product_payload(), headers=alice["headers"])).json()["id"]

        response = await client.put(f"{PRODUCTS}/{product_id}/categories/{category_id}", headers=mallory["headers"])

        assert response.status_code == 403

    async def test_categories_of_missing_product(self, client: AsyncClient):
        response = await client.get(f"{PRODUCTS}/5/categories")

        assert response.status_code == 404
