"""Tests for the SQLAlchemy repositories against an in-memory SQLite database."""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy import event, func, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from productcategories.application.category_service import CategoryService
from productcategories.application.product_service import ProductService
from productcategories.application.results import ErrorCode
from productcategories.catalog.models import CategoryModel, ProductCategoryModel
from productcategories.catalog.pagination import PageRequest
from productcategories.catalog.unit_of_work import SqlAlchemyUnitOfWork
from productcategories.infrastructure.database import Base, enable_sqlite_foreign_keys


@pytest.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Create a fresh schema in a private in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def seeded(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Insert categories 1-4."""
    async with session_factory() as session:
        session.add_all(
            CategoryModel(name=name) for name in ("Electronics", "Home", "Garden", "Toys")
        )
        await session.commit()


async def _link_rows(factory: async_sessionmaker[AsyncSession]) -> set[tuple[int, int]]:
    async with factory() as session:
        result = await session.execute(
            select(ProductCategoryModel.product_id, ProductCategoryModel.category_id)
        )
        return {(row.product_id, row.category_id) for row in result}


async def _category_count(factory: async_sessionmaker[AsyncSession]) -> int:
    async with factory() as session:
        result = await session.execute(select(func.count()).select_from(CategoryModel))
        return result.scalar_one()


class TestSqlAlchemyCategoryRepository:
    """Tests for SqlAlchemyCategoryRepository."""

    @pytest.mark.asyncio
    async def test_add_and_get(self, session_factory) -> None:
        async with session_factory() as session:
            uow = SqlAlchemyUnitOfWork(session)
            created = await uow.categories.add("Books")
            await uow.commit()

        async with session_factory() as session:
            fetched = await SqlAlchemyUnitOfWork(session).categories.get_by_id(created.id)

        assert fetched is not None
        assert fetched.name == "Books"

    @pytest.mark.asyncio
    async def test_get_page_and_find_by_ids(self, session_factory, seeded) -> None:
        async with session_factory() as session:
            uow = SqlAlchemyUnitOfWork(session)
            page = await uow.categories.get_page(PageRequest(2, 3))
            found = await uow.categories.find_by_ids([4, 2, 99])
            empty = await uow.categories.find_by_ids([])

        assert [c.id for c in page] == [4]
        assert [c.id for c in found] == [2, 4]
        assert empty == []

    @pytest.mark.asyncio
    async def test_ping(self, session_factory) -> None:
        async with session_factory() as session:
            assert await SqlAlchemyUnitOfWork(session).ping() is True


class TestProductPersistence:
    """Product writes through the services on SQLite."""

    @pytest.mark.asyncio
    async def test_create_links_categories(self, session_factory, seeded) -> None:
        async with session_factory() as session:
            result = await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2]
            )

        assert result.success
        assert result.product.category_ids == [1, 2]
        assert await _link_rows(session_factory) == {(1, 1), (1, 2)}

    @pytest.mark.asyncio
    async def test_replace_category_set(self, session_factory, seeded) -> None:
        async with session_factory() as session:
            await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2]
            )

        async with session_factory() as session:
            grown = await ProductService(
                SqlAlchemyUnitOfWork(session)
            ).update_product_categories(1, [1, 2, 3])
        assert grown.success
        assert await _link_rows(session_factory) == {(1, 1), (1, 2), (1, 3)}

        async with session_factory() as session:
            shifted = await ProductService(
                SqlAlchemyUnitOfWork(session)
            ).update_product_categories(1, [2, 3])
        assert shifted.success
        assert shifted.product.category_ids == [2, 3]
        assert await _link_rows(session_factory) == {(1, 2), (1, 3)}

    @pytest.mark.asyncio
    async def test_unknown_category_leaves_set_unchanged(
        self, session_factory, seeded
    ) -> None:
        async with session_factory() as session:
            await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2]
            )

        async with session_factory() as session:
            result = await ProductService(
                SqlAlchemyUnitOfWork(session)
            ).update_product_categories(1, [1, 99])

        assert result.error_code == ErrorCode.INVALID_CATEGORY
        assert await _link_rows(session_factory) == {(1, 1), (1, 2)}

    @pytest.mark.asyncio
    async def test_create_with_unknown_category_persists_nothing(
        self, session_factory, seeded
    ) -> None:
        async with session_factory() as session:
            result = await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 99]
            )

        assert result.error_code == ErrorCode.CATEGORY_NOT_FOUND
        async with session_factory() as session:
            assert await SqlAlchemyUnitOfWork(session).products.get_by_id(1) is None
        assert await _link_rows(session_factory) == set()

    @pytest.mark.asyncio
    async def test_delete_cascades_links_only(self, session_factory, seeded) -> None:
        async with session_factory() as session:
            await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2, 3]
            )

        async with session_factory() as session:
            result = await ProductService(SqlAlchemyUnitOfWork(session)).delete_product(1)

        assert result.success
        assert result.product.name == "Widget"
        assert await _link_rows(session_factory) == set()
        assert await _category_count(session_factory) == 4

    @pytest.mark.asyncio
    async def test_category_in_use_cannot_be_deleted(
        self, session_factory, seeded
    ) -> None:
        async with session_factory() as session:
            await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2]
            )

        async with session_factory() as session:
            in_use = await CategoryService(SqlAlchemyUnitOfWork(session)).delete_category(1)
        async with session_factory() as session:
            unused = await CategoryService(SqlAlchemyUnitOfWork(session)).delete_category(4)

        assert in_use.error_code == ErrorCode.CATEGORY_IN_USE
        assert unused.success
        assert await _category_count(session_factory) == 3

    @pytest.mark.asyncio
    async def test_second_page_of_fifteen_products(self, session_factory, seeded) -> None:
        async with session_factory() as session:
            service = ProductService(SqlAlchemyUnitOfWork(session))
            for i in range(1, 16):
                await service.create_product(f"Product {i}", [1, 2])

        async with session_factory() as session:
            result = await ProductService(SqlAlchemyUnitOfWork(session)).list_products(2, 10)

        assert result.success
        assert [p.id for p in result.products] == [11, 12, 13, 14, 15]
        assert all(p.category_ids == [1, 2] for p in result.products)

    @pytest.mark.asyncio
    async def test_new_links_are_returned_in_category_order(
        self, session_factory, seeded
    ) -> None:
        async with session_factory() as session:
            result = await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [3, 1, 2]
            )

        assert result.product.category_ids == [1, 2, 3]


class TestForeignKeys:
    """The store itself rejects links to missing rows."""

    @pytest.mark.asyncio
    async def test_foreign_keys_enabled(self, session_factory) -> None:
        async with session_factory() as session:
            result = await session.execute(text("PRAGMA foreign_keys"))
            assert result.scalar_one() == 1

    @pytest.mark.asyncio
    async def test_link_to_unknown_category_rejected(
        self, session_factory, seeded
    ) -> None:
        async with session_factory() as session:
            await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2]
            )

        async with session_factory() as session:
            session.add(ProductCategoryModel(product_id=1, category_id=999))
            with pytest.raises(IntegrityError):
                await session.commit()

        assert await _link_rows(session_factory) == {(1, 1), (1, 2)}

    @pytest.mark.asyncio
    async def test_referenced_category_row_cannot_be_deleted(
        self, session_factory, seeded
    ) -> None:
        async with session_factory() as session:
            await ProductService(SqlAlchemyUnitOfWork(session)).create_product(
                "Widget", [1, 2]
            )

        async with session_factory() as session:
            with pytest.raises(IntegrityError):
                await session.execute(text("DELETE FROM category WHERE id = 1"))

        assert await _category_count(session_factory) == 4
