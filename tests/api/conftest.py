"""Shared fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from productcategories.api.dependencies import get_unit_of_work
from productcategories.catalog.memory import InMemoryStore, InMemoryUnitOfWork
from productcategories.catalog.unit_of_work import UnitOfWork
from productcategories.main import app


@pytest.fixture
def api_store(seeded_store: InMemoryStore) -> InMemoryStore:
    """Store shared by every request of one test, seeded with categories 1-4."""
    return seeded_store


@pytest.fixture
def client(api_store: InMemoryStore) -> Iterator[TestClient]:
    """Create test client whose requests run against the in-memory store."""

    async def override_unit_of_work() -> UnitOfWork:
        return InMemoryUnitOfWork(api_store)

    app.dependency_overrides[get_unit_of_work] = override_unit_of_work
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def product_id(client: TestClient) -> int:
    """Create a product linked to categories 1 and 2."""
    response = client.post("/api/product", json={"name": "Widget", "categoryIds": [1, 2]})
    assert response.status_code == 200
    return response.json()["id"]
