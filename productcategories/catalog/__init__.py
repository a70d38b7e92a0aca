"""Product Catalog storage.

Provides the ORM models, repository interfaces with SQLAlchemy and
in-memory implementations, the unit of work, and pagination helpers.
"""

from productcategories.catalog.memory import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
)
from productcategories.catalog.models import CategoryModel, ProductCategoryModel, ProductModel
from productcategories.catalog.pagination import PageRequest, paginate, paginate_query
from productcategories.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)
from productcategories.catalog.unit_of_work import SqlAlchemyUnitOfWork, UnitOfWork

__all__ = [
    # Models
    "CategoryModel",
    "ProductCategoryModel",
    "ProductModel",
    # Pagination
    "PageRequest",
    "paginate",
    "paginate_query",
    # Repositories
    "CategoryRepository",
    "ProductRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProductRepository",
    "InMemoryCategoryRepository",
    "InMemoryProductRepository",
    "InMemoryStore",
    # Unit of work
    "UnitOfWork",
    "SqlAlchemyUnitOfWork",
    "InMemoryUnitOfWork",
]
