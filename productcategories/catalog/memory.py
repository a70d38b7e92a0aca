"""In-memory catalog store.

Dictionary-backed implementations of the catalog repositories and unit
of work. Used by the test suite and for running the API without a
database file. Rolling back restores the snapshot taken at the last
commit.
"""

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field

from productcategories.catalog.pagination import PageRequest
from productcategories.catalog.repository import CategoryRepository, ProductRepository
from productcategories.catalog.unit_of_work import UnitOfWork
from productcategories.domain.entities import Category, Product
from productcategories.domain.exceptions import CategoryNotFoundError, ProductNotFoundError


@dataclass
class InMemoryStore:
    """Rows of the three catalog tables.

    Attributes:
        categories: Category names by ID.
        products: Product names by ID.
        links: (product_id, category_id) join rows.
    """

    categories: dict[int, str] = field(default_factory=dict)
    products: dict[int, str] = field(default_factory=dict)
    links: set[tuple[int, int]] = field(default_factory=set)
    next_category_id: int = 1
    next_product_id: int = 1

    def snapshot(self) -> "InMemoryStore":
        """Copy the current rows."""
        return copy.deepcopy(self)

    def restore(self, snapshot: "InMemoryStore") -> None:
        """Replace the current rows with a previous snapshot."""
        restored = copy.deepcopy(snapshot)
        self.categories = restored.categories
        self.products = restored.products
        self.links = restored.links
        self.next_category_id = restored.next_category_id
        self.next_product_id = restored.next_product_id

    def category_ids_of(self, product_id: int) -> list[int]:
        """Linked category IDs of a product, ascending."""
        return sorted(c_id for p_id, c_id in self.links if p_id == product_id)


class InMemoryCategoryRepository(CategoryRepository):
    """Category repository over an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get_by_id(self, category_id: int) -> Category | None:
        name = self.store.categories.get(category_id)
        if name is None:
            return None
        return Category(id=category_id, name=name)

    async def get_page(self, page: PageRequest) -> list[Category]:
        ids = sorted(self.store.categories)[page.offset : page.offset + page.limit]
        return [Category(id=c_id, name=self.store.categories[c_id]) for c_id in ids]

    async def find_by_ids(self, category_ids: Iterable[int]) -> list[Category]:
        ids = sorted(set(category_ids) & self.store.categories.keys())
        return [Category(id=c_id, name=self.store.categories[c_id]) for c_id in ids]

    async def add(self, name: str) -> Category:
        category_id = self.store.next_category_id
        self.store.next_category_id += 1
        self.store.categories[category_id] = name
        return Category(id=category_id, name=name)

    async def update(self, category: Category) -> Category:
        if category.id not in self.store.categories:
            raise CategoryNotFoundError(category.id)
        self.store.categories[category.id] = category.name
        return Category(id=category.id, name=category.name)

    async def remove(self, category_id: int) -> None:
        if category_id not in self.store.categories:
            raise CategoryNotFoundError(category_id)
        del self.store.categories[category_id]


class InMemoryProductRepository(ProductRepository):
    """Product repository over an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _to_entity(self, product_id: int) -> Product:
        return Product(
            id=product_id,
            name=self.store.products[product_id],
            categories=[
                Category(id=c_id, name=self.store.categories[c_id])
                for c_id in self.store.category_ids_of(product_id)
            ],
        )

    def _link(self, product_id: int, category_ids: Iterable[int]) -> None:
        for category_id in category_ids:
            if category_id not in self.store.categories:
                raise CategoryNotFoundError(category_id)
            self.store.links.add((product_id, category_id))

    def _unlink(self, product_id: int) -> None:
        self.store.links = {link for link in self.store.links if link[0] != product_id}

    async def get_by_id(self, product_id: int) -> Product | None:
        if product_id not in self.store.products:
            return None
        return self._to_entity(product_id)

    async def get_page(self, page: PageRequest) -> list[Product]:
        ids = sorted(self.store.products)[page.offset : page.offset + page.limit]
        return [self._to_entity(p_id) for p_id in ids]

    async def add(self, name: str, categories: list[Category]) -> Product:
        product_id = self.store.next_product_id
        self.store.next_product_id += 1
        self.store.products[product_id] = name
        self._link(product_id, (category.id for category in categories))
        return self._to_entity(product_id)

    async def update(self, product: Product) -> Product:
        if product.id not in self.store.products:
            raise ProductNotFoundError(product.id)
        self.store.products[product.id] = product.name
        self._unlink(product.id)
        self._link(product.id, product.category_ids)
        return self._to_entity(product.id)

    async def remove(self, product_id: int) -> None:
        if product_id not in self.store.products:
            raise ProductNotFoundError(product_id)
        del self.store.products[product_id]
        self._unlink(product_id)

    async def count_by_category(self, category_id: int) -> int:
        return sum(1 for _, c_id in self.store.links if c_id == category_id)


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over a shared InMemoryStore.

    Example usage:
        store = InMemoryStore()
        uow = InMemoryUnitOfWork(store)
        await uow.categories.add("Garden")
        await uow.commit()
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        """Initialize unit of work.

        Args:
            store: Store to operate on; a fresh one if omitted.
        """
        self.store = store if store is not None else InMemoryStore()
        self.categories = InMemoryCategoryRepository(self.store)
        self.products = InMemoryProductRepository(self.store)
        self._committed = self.store.snapshot()

    async def commit(self) -> None:
        self._committed = self.store.snapshot()

    async def rollback(self) -> None:
        self.store.restore(self._committed)

    async def ping(self) -> bool:
        return True
