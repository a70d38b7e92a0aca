"""Shared test fixtures."""

import os

# Keep tests off the on-disk database; must run before settings load.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest

from productcategories.catalog.memory import InMemoryStore, InMemoryUnitOfWork


@pytest.fixture
def store() -> InMemoryStore:
    """Create an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    """Create a unit of work over the in-memory store."""
    return InMemoryUnitOfWork(store)


@pytest.fixture
def seeded_store() -> InMemoryStore:
    """Create a store with categories 1-4 and no products."""
    return InMemoryStore(
        categories={1: "Electronics", 2: "Home", 3: "Garden", 4: "Toys"},
        next_category_id=5,
    )
