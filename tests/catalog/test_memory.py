"""Tests for the in-memory catalog store."""

import pytest

from productcategories.catalog.memory import InMemoryStore, InMemoryUnitOfWork
from productcategories.catalog.pagination import PageRequest
from productcategories.domain.entities import Category
from productcategories.domain.exceptions import CategoryNotFoundError, ProductNotFoundError


@pytest.fixture
def uow(seeded_store: InMemoryStore) -> InMemoryUnitOfWork:
    """Unit of work over a store with categories 1-4."""
    return InMemoryUnitOfWork(seeded_store)


class TestInMemoryCategoryRepository:
    """Tests for InMemoryCategoryRepository."""

    @pytest.mark.asyncio
    async def test_add_assigns_increasing_ids(self, uow: InMemoryUnitOfWork) -> None:
        first = await uow.categories.add("Books")
        second = await uow.categories.add("Sports")
        assert (first.id, second.id) == (5, 6)

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_unknown(self, uow: InMemoryUnitOfWork) -> None:
        found = await uow.categories.find_by_ids([3, 1, 99])
        assert [c.id for c in found] == [1, 3]

    @pytest.mark.asyncio
    async def test_get_page_orders_by_id(self, uow: InMemoryUnitOfWork) -> None:
        page = await uow.categories.get_page(PageRequest(2, 3))
        assert page == [Category(id=4, name="Toys")]

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, uow: InMemoryUnitOfWork) -> None:
        with pytest.raises(CategoryNotFoundError):
            await uow.categories.update(Category(id=42, name="Nope"))


class TestInMemoryProductRepository:
    """Tests for InMemoryProductRepository."""

    @pytest.mark.asyncio
    async def test_add_links_categories(self, uow: InMemoryUnitOfWork) -> None:
        categories = await uow.categories.find_by_ids([2, 1])
        product = await uow.products.add("Widget", categories)

        assert product.category_ids == [1, 2]
        assert uow.store.links == {(product.id, 1), (product.id, 2)}

    @pytest.mark.asyncio
    async def test_update_replaces_links(self, uow: InMemoryUnitOfWork) -> None:
        product = await uow.products.add("Widget", await uow.categories.find_by_ids([1, 2]))

        product.categories = await uow.categories.find_by_ids([3, 4])
        updated = await uow.products.update(product)

        assert updated.category_ids == [3, 4]
        assert uow.store.links == {(product.id, 3), (product.id, 4)}

    @pytest.mark.asyncio
    async def test_remove_deletes_links_only(self, uow: InMemoryUnitOfWork) -> None:
        product = await uow.products.add("Widget", await uow.categories.find_by_ids([1, 2]))

        await uow.products.remove(product.id)

        assert uow.store.links == set()
        assert set(uow.store.categories) == {1, 2, 3, 4}

    @pytest.mark.asyncio
    async def test_remove_missing_raises(self, uow: InMemoryUnitOfWork) -> None:
        with pytest.raises(ProductNotFoundError):
            await uow.products.remove(1)

    @pytest.mark.asyncio
    async def test_count_by_category(self, uow: InMemoryUnitOfWork) -> None:
        await uow.products.add("A", await uow.categories.find_by_ids([1, 2]))
        await uow.products.add("B", await uow.categories.find_by_ids([1, 3]))

        assert await uow.products.count_by_category(1) == 2
        assert await uow.products.count_by_category(4) == 0


class TestInMemoryUnitOfWork:
    """Tests for commit/rollback semantics."""

    @pytest.mark.asyncio
    async def test_rollback_discards_uncommitted_changes(
        self, uow: InMemoryUnitOfWork
    ) -> None:
        await uow.categories.add("Books")
        await uow.rollback()

        assert 5 not in uow.store.categories
        assert uow.store.next_category_id == 5

    @pytest.mark.asyncio
    async def test_rollback_keeps_committed_changes(self, uow: InMemoryUnitOfWork) -> None:
        await uow.categories.add("Books")
        await uow.commit()
        await uow.categories.add("Sports")
        await uow.rollback()

        assert uow.store.categories[5] == "Books"
        assert 6 not in uow.store.categories

    @pytest.mark.asyncio
    async def test_ping(self, uow: InMemoryUnitOfWork) -> None:
        assert await uow.ping() is True
