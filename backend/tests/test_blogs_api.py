"""
Blog API Backend - Blog Endpoint Tests
=======================================

What:  HTTP-level tests for /blogs and /blogs/{id}.
How:   HTTPX AsyncClient over ASGITransport against a freshly seeded app.

Seed store: [{"First", "Blog 1"}, {"Second", "Blog 2"}]
"""

import pytest

SEED = [
    {"title": "First", "body": "Blog 1"},
    {"title": "Second", "body": "Blog 2"},
]


class TestListAndGet:

    @pytest.mark.asyncio
    async def test_list_seed_in_order(self, test_client, auth_headers):
        response = await test_client.get("/blogs", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == SEED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", [0, 1])
    async def test_get_in_range(self, test_client, auth_headers, blog_id):
        response = await test_client.get(f"/blogs/{blog_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == SEED[blog_id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", [-1, 2, 50])
    async def test_get_out_of_range_is_empty_404(self, test_client, auth_headers, blog_id):
        response = await test_client.get(f"/blogs/{blog_id}", headers=auth_headers)

        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client, auth_headers):
        response = await test_client.get("/blogs/abc", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Bad request: invalid request parameters."}

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_shape(self, test_client, auth_headers):
        response = await test_client.get("/posts", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    @pytest.mark.asyncio
    async def test_wrong_method_uses_error_shape(self, test_client, auth_headers):
        response = await test_client.patch("/blogs/0", headers=auth_headers)

        assert response.status_code == 405
        assert "error" in response.json()


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, test_client, auth_headers, sample_blog):
        response = await test_client.post("/blogs", json=sample_blog, headers=auth_headers)

        assert response.status_code == 201
        assert response.json() == sample_blog
        assert response.headers["location"] == "/blogs/2"

        fetched = await test_client.get(response.headers["location"], headers=auth_headers)
        assert fetched.status_code == 200
        assert fetched.json() == sample_blog

    @pytest.mark.asyncio
    async def test_create_on_empty_store(self, auth_headers, sample_blog):
        from httpx import ASGITransport, AsyncClient

        from blog_api.config import Settings
        from blog_api.main import create_app

        app = create_app(Settings(seed_store=False))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            assert (await client.get("/blogs", headers=auth_headers)).json() == []
            assert (await client.get("/blogs/0", headers=auth_headers)).status_code == 404

            response = await client.post("/blogs", json=sample_blog, headers=auth_headers)

            assert response.headers["location"] == "/blogs/0"

    @pytest.mark.asyncio
    async def test_extra_fields_are_ignored(self, test_client, auth_headers):
        response = await test_client.post(
            "/blogs",
            json={"title": "T", "body": "B", "author": "someone"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json() == {"title": "T", "body": "B"}


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_replaces_only_target(self, test_client, auth_headers):
        response = await test_client.put(
            "/blogs/1", json={"title": "Edited", "body": "New"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {"title": "Edited", "body": "New"}

        listing = (await test_client.get("/blogs", headers=auth_headers)).json()
        assert listing == [SEED[0], {"title": "Edited", "body": "New"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", [-1, 2])
    async def test_update_out_of_range(self, test_client, app, auth_headers, sample_blog, blog_id):
        response = await test_client.put(f"/blogs/{blog_id}", json=sample_blog, headers=auth_headers)

        assert response.status_code == 404
        assert response.content == b""
        assert [b.model_dump() for b in app.state.store.list_all()] == SEED

    @pytest.mark.asyncio
    async def test_update_with_malformed_body_is_500(self, test_client, app, auth_headers):
        response = await test_client.put("/blogs/0", json={"title": "x"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error."}
        assert [b.model_dump() for b in app.state.store.list_all()] == SEED


class TestDeleteStrict:
    """Default bounds: DELETE accepts exactly the ids GET accepts."""

    @pytest.mark.asyncio
    async def test_delete_index_zero(self, test_client, auth_headers):
        response = await test_client.delete("/blogs/0", headers=auth_headers)

        assert response.status_code == 204
        assert response.content == b""
        assert (await test_client.get("/blogs", headers=auth_headers)).json() == [SEED[1]]

    @pytest.mark.asyncio
    async def test_delete_shifts_ids(self, test_client, auth_headers, sample_blog):
        await test_client.post("/blogs", json=sample_blog, headers=auth_headers)

        await test_client.delete("/blogs/1", headers=auth_headers)

        response = await test_client.get("/blogs/1", headers=auth_headers)
        assert response.json() == sample_blog
        assert (await test_client.get("/blogs/2", headers=auth_headers)).status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", [-1, 2])
    async def test_delete_out_of_range(self, test_client, app, auth_headers, blog_id):
        response = await test_client.delete(f"/blogs/{blog_id}", headers=auth_headers)

        assert response.status_code == 404
        assert len(app.state.store) == 2


class TestDeleteLegacy:
    """Legacy bounds: id <= 0 and id > len rejected; id == len faults."""

    @pytest.mark.asyncio
    async def test_index_zero_rejected(self, legacy_client, legacy_app, auth_headers):
        response = await legacy_client.delete("/blogs/0", headers=auth_headers)

        assert response.status_code == 404
        assert len(legacy_app.state.store) == 2

    @pytest.mark.asyncio
    async def test_last_index_deleted(self, legacy_client, auth_headers):
        response = await legacy_client.delete("/blogs/1", headers=auth_headers)

        assert response.status_code == 204
        assert (await legacy_client.get("/blogs", headers=auth_headers)).json() == [SEED[0]]

    @pytest.mark.asyncio
    async def test_index_equal_to_length_is_500(self, legacy_client, legacy_app, auth_headers):
        response = await legacy_client.delete("/blogs/2", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error."}
        assert len(legacy_app.state.store) == 2

    @pytest.mark.asyncio
    async def test_index_beyond_length_rejected(self, legacy_client, auth_headers):
        response = await legacy_client.delete("/blogs/3", headers=auth_headers)

        assert response.status_code == 404


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_store_size(self, test_client, auth_headers, sample_blog):
        await test_client.post("/blogs", json=sample_blog, headers=auth_headers)

        response = await test_client.get("/health")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["blog_count"] == 3
        assert body["version"] == "1.0.0"
