"""Catalog repositories.

Abstract repository interfaces used by the application services, and
their SQLAlchemy implementations. Repositories only flush; committing
or rolling back is left to the unit of work.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from productcategories.catalog.models import CategoryModel, ProductCategoryModel, ProductModel
from productcategories.catalog.pagination import PageRequest, paginate_query
from productcategories.domain.entities import Category, Product
from productcategories.domain.exceptions import CategoryNotFoundError, ProductNotFoundError


# ============================================================================
# Interfaces
# ============================================================================


class CategoryRepository(ABC):
    """Storage operations for categories."""

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Category | None:
        """Get category by ID, or None if it does not exist."""

    @abstractmethod
    async def get_page(self, page: PageRequest) -> list[Category]:
        """Get one page of categories ordered by ID."""

    @abstractmethod
    async def find_by_ids(self, category_ids: Iterable[int]) -> list[Category]:
        """Get the existing categories among the given IDs, ordered by ID."""

    @abstractmethod
    async def add(self, name: str) -> Category:
        """Insert a category and return it with its assigned ID."""

    @abstractmethod
    async def update(self, category: Category) -> Category:
        """Overwrite the stored category with the given values."""

    @abstractmethod
    async def remove(self, category_id: int) -> None:
        """Delete a category."""


class ProductRepository(ABC):
    """Storage operations for products and their category links."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product with its categories, or None if it does not exist."""

    @abstractmethod
    async def get_page(self, page: PageRequest) -> list[Product]:
        """Get one page of products ordered by ID."""

    @abstractmethod
    async def add(self, name: str, categories: list[Category]) -> Product:
        """Insert a product linked to the given categories."""

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Overwrite the product's name and replace its category links."""

    @abstractmethod
    async def remove(self, product_id: int) -> None:
        """Delete a product together with its category links."""

    @abstractmethod
    async def count_by_category(self, category_id: int) -> int:
        """Count products linked to a category."""


# ============================================================================
# SQLAlchemy Implementations
# ============================================================================


class SqlAlchemyCategoryRepository(CategoryRepository):
    """Repository for Category database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = SqlAlchemyCategoryRepository(session)
            category = await repo.add("Garden")
            await session.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_id(self, category_id: int) -> Category | None:
        model = await self.session.get(CategoryModel, category_id)
        return model.to_entity() if model else None

    async def get_page(self, page: PageRequest) -> list[Category]:
        query = paginate_query(select(CategoryModel).order_by(CategoryModel.id), page)
        result = await self.session.execute(query)
        return [model.to_entity() for model in result.scalars().all()]

    async def find_by_ids(self, category_ids: Iterable[int]) -> list[Category]:
        ids = set(category_ids)
        if not ids:
            return []

        query = (
            select(CategoryModel)
            .where(CategoryModel.id.in_(ids))
            .order_by(CategoryModel.id)
        )
        result = await self.session.execute(query)
        return [model.to_entity() for model in result.scalars().all()]

    async def add(self, name: str) -> Category:
        model = CategoryModel(name=name)
        self.session.add(model)
        await self.session.flush()
        return model.to_entity()

    async def update(self, category: Category) -> Category:
        model = await self.session.get(CategoryModel, category.id)
        if model is None:
            raise CategoryNotFoundError(category.id)

        model.name = category.name
        await self.session.flush()
        return model.to_entity()

    async def remove(self, category_id: int) -> None:
        model = await self.session.get(CategoryModel, category_id)
        if model is None:
            raise CategoryNotFoundError(category_id)

        await self.session.delete(model)
        await self.session.flush()


class SqlAlchemyProductRepository(ProductRepository):
    """Repository for Product database operations.

    Category links are loaded eagerly with every product so the
    association set can be projected without further queries.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_id(self, product_id: int) -> Product | None:
        model = await self.session.get(ProductModel, product_id)
        return model.to_entity() if model else None

    async def get_page(self, page: PageRequest) -> list[Product]:
        query = paginate_query(select(ProductModel).order_by(ProductModel.id), page)
        result = await self.session.execute(query)
        return [model.to_entity() for model in result.scalars().all()]

    async def add(self, name: str, categories: list[Category]) -> Product:
        model = ProductModel(name=name)
        for category in categories:
            model.category_links.append(await self._new_link(category.id))

        self.session.add(model)
        await self.session.flush()
        return model.to_entity()

    async def update(self, product: Product) -> Product:
        model = await self.session.get(ProductModel, product.id)
        if model is None:
            raise ProductNotFoundError(product.id)

        model.name = product.name

        # Links that survive are kept as-is; the rest become orphans and
        # are deleted on flush.
        existing = {link.category_id: link for link in model.category_links}
        links = []
        for category_id in product.category_ids:
            link = existing.get(category_id)
            if link is None:
                link = await self._new_link(category_id)
            links.append(link)
        model.category_links = links

        await self.session.flush()
        return model.to_entity()

    async def remove(self, product_id: int) -> None:
        model = await self.session.get(ProductModel, product_id)
        if model is None:
            raise ProductNotFoundError(product_id)

        await self.session.delete(model)
        await self.session.flush()

    async def count_by_category(self, category_id: int) -> int:
        query = (
            select(func.count())
            .select_from(ProductCategoryModel)
            .where(ProductCategoryModel.category_id == category_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one()

    async def _new_link(self, category_id: int) -> ProductCategoryModel:
        """Build a link row to an existing category."""
        category = await self.session.get(CategoryModel, category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return ProductCategoryModel(category=category)
