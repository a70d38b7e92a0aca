"""Product application service.

Manages products and their category association set. A product must
always be linked to exactly 2 or 3 distinct existing categories; the
set is validated before any write and replaced as a whole inside one
transaction.
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from productcategories.application.results import (
    ErrorCode,
    ProductListResult,
    ProductResult,
    error_code_for,
)
from productcategories.catalog.pagination import PageRequest
from productcategories.catalog.unit_of_work import UnitOfWork
from productcategories.domain.entities import (
    Category,
    Product,
    ensure_distinct,
    validate_category_count,
    validate_name,
)
from productcategories.domain.exceptions import (
    CategoryNotFoundError,
    DomainError,
    InvalidCategoryError,
    ProductNotFoundError,
)

logger = structlog.get_logger()


class ProductService:
    """Application service for managing products.

    Handles:
    - Creating products with their initial category set
    - Renaming products
    - Replacing a product's category set
    - Deleting products along with their category links
    """

    def __init__(self, uow: UnitOfWork, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            uow: Unit of work providing the repositories.
            request_id: Request ID for correlation.
        """
        self.uow = uow
        self.request_id = request_id
        self.logger = logger.bind(request_id=request_id)

    async def get_product(self, product_id: int) -> ProductResult:
        """Get a product with its categories.

        Args:
            product_id: Product identifier.

        Returns:
            ProductResult with the product if found.
        """
        self.logger.info("Fetching product", product_id=product_id)

        try:
            product = await self.uow.products.get_by_id(product_id)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error fetching product", product_id=product_id)
            return ProductResult.failure(ErrorCode.INTERNAL_ERROR, "Failed to fetch product")

        if product is None:
            error = ProductNotFoundError(product_id)
            self.logger.warning("Product not found", product_id=product_id)
            return ProductResult.failure(ErrorCode.PRODUCT_NOT_FOUND, error.message)

        return ProductResult(product=product)

    async def list_products(
        self,
        page_number: int = 1,
        page_size: int = 10,
    ) -> ProductListResult:
        """List one page of products ordered by ID.

        Args:
            page_number: Page number (1-based).
            page_size: Items per page.

        Returns:
            ProductListResult with the page.
        """
        self.logger.info(
            "Fetching paginated products",
            page_number=page_number,
            page_size=page_size,
        )

        try:
            page = PageRequest(page_number, page_size)
            products = await self.uow.products.get_page(page)
        except DomainError as e:
            return ProductListResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error fetching products")
            return ProductListResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to fetch products"
            )

        self.logger.info("Fetched products", count=len(products))
        return ProductListResult(
            products=products,
            page_number=page_number,
            page_size=page_size,
        )

    async def create_product(self, name: str, category_ids: list[int]) -> ProductResult:
        """Create a product linked to 2 or 3 categories.

        Nothing is persisted unless every category resolves.

        Args:
            name: Product name.
            category_ids: IDs of the categories to link.

        Returns:
            ProductResult with the created product and its categories.
        """
        self.logger.info("Creating product", name=name, category_ids=category_ids)

        try:
            validate_name(name)
            validate_category_count(category_ids)
            ensure_distinct(category_ids)

            categories: list[Category] = []
            for category_id in category_ids:
                category = await self.uow.categories.get_by_id(category_id)
                if category is None:
                    raise CategoryNotFoundError(category_id)
                categories.append(category)

            product = await self.uow.products.add(name, categories)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning("Product not created", name=name, error=e.message)
            return ProductResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error creating product", name=name)
            return ProductResult.failure(ErrorCode.INTERNAL_ERROR, "Failed to create product")

        self.logger.info("Product created", product_id=product.id)
        return ProductResult(product=product)

    async def update_product_name(self, product_id: int, name: str) -> ProductResult:
        """Rename a product, keeping its categories.

        Args:
            product_id: Product identifier.
            name: New product name.

        Returns:
            ProductResult with the updated product.
        """
        self.logger.info("Updating product name", product_id=product_id)

        try:
            product = await self._require(product_id)
            product.name = validate_name(name)
            product = await self.uow.products.update(product)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning(
                "Product name not updated", product_id=product_id, error=e.message
            )
            return ProductResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error updating product name", product_id=product_id)
            return ProductResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to update product name"
            )

        self.logger.info("Updated product name", product_id=product_id)
        return ProductResult(product=product)

    async def update_product_categories(
        self,
        product_id: int,
        category_ids: list[int],
    ) -> ProductResult:
        """Replace a product's entire category set.

        The product ends up linked to exactly the given categories. If
        any ID is unknown or repeated, the existing set is left as-is.

        Args:
            product_id: Product identifier.
            category_ids: IDs of the new category set.

        Returns:
            ProductResult with the updated product.
        """
        self.logger.info(
            "Updating product categories",
            product_id=product_id,
            category_ids=category_ids,
        )

        try:
            product = await self._require(product_id)
            validate_category_count(category_ids)

            categories = await self.uow.categories.find_by_ids(category_ids)
            if len(categories) != len(category_ids):
                raise InvalidCategoryError(category_ids, "Invalid category")

            product.categories = categories
            product = await self.uow.products.update(product)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning(
                "Product categories not updated",
                product_id=product_id,
                error=e.message,
            )
            return ProductResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception(
                "Error updating product categories", product_id=product_id
            )
            return ProductResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to update product categories"
            )

        self.logger.info(
            "Updated product categories",
            product_id=product_id,
            category_ids=product.category_ids,
        )
        return ProductResult(product=product)

    async def delete_product(self, product_id: int) -> ProductResult:
        """Delete a product and its category links.

        The linked categories themselves are kept.

        Args:
            product_id: Product identifier.

        Returns:
            ProductResult with a snapshot of the deleted product.
        """
        self.logger.info("Deleting product", product_id=product_id)

        try:
            product = await self._require(product_id)
            await self.uow.products.remove(product_id)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning(
                "Product not deleted", product_id=product_id, error=e.message
            )
            return ProductResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error deleting product", product_id=product_id)
            return ProductResult.failure(ErrorCode.INTERNAL_ERROR, "Failed to delete product")

        self.logger.info("Product deleted", product_id=product_id)
        return ProductResult(product=product)

    async def _require(self, product_id: int) -> Product:
        """Load a product or raise ProductNotFoundError."""
        product = await self.uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
