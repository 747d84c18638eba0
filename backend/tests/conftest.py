"""
Blog API Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── app: FastAPI app with its own seeded store (strict delete bounds)
    ├── legacy_app: Same, with the legacy delete bounds rule
    ├── auth_headers: A syntactically valid Authorization header
    ├── test_client: HTTPX AsyncClient bound to `app`
    └── legacy_client: HTTPX AsyncClient bound to `legacy_app`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from blog_api.config import Settings
from blog_api.main import create_app


@pytest.fixture
def app():
    """A fresh app per test so store mutations never leak between tests."""
    return create_app(Settings(seed_store=True, delete_bounds="strict"))


@pytest.fixture
def legacy_app():
    return create_app(Settings(seed_store=True, delete_bounds="legacy"))


@pytest.fixture
def auth_headers():
    """
    Any token is accepted as long as the value starts with "Bearer ".

    Usage:
        response = await test_client.get("/blogs", headers=auth_headers)
    """
    return {"Authorization": "Bearer test-token"}


@pytest.fixture
def sample_blog():
    return {"title": "T", "body": "B"}


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def legacy_client(legacy_app):
    transport = ASGITransport(app=legacy_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
