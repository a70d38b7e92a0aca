"""Unit of work over the catalog repositories.

A unit of work is one transaction scope: services make their changes
through its repositories and then either commit or roll back, so a
failed operation never leaves partial state behind.
"""

from abc import ABC, abstractmethod

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from productcategories.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)


class UnitOfWork(ABC):
    """Transaction scope exposing the catalog repositories.

    Attributes:
        categories: Category repository bound to this transaction.
        products: Product repository bound to this transaction.
    """

    categories: CategoryRepository
    products: ProductRepository

    @abstractmethod
    async def commit(self) -> None:
        """Make all pending changes durable."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending changes."""

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the underlying store is reachable."""


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work backed by a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work.

        Args:
            session: Async SQLAlchemy session owning the transaction.
        """
        self.session = session
        self.categories = SqlAlchemyCategoryRepository(session)
        self.products = SqlAlchemyProductRepository(session)

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def ping(self) -> bool:
        await self.session.execute(text("SELECT 1"))
        return True
