"""Category application service.

Create, read, update and delete operations on standalone categories.
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from productcategories.application.results import (
    CategoryListResult,
    CategoryResult,
    ErrorCode,
    error_code_for,
)
from productcategories.catalog.pagination import PageRequest
from productcategories.catalog.unit_of_work import UnitOfWork
from productcategories.domain.entities import Category, validate_name
from productcategories.domain.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DomainError,
)

logger = structlog.get_logger()


class CategoryService:
    """Application service for managing categories.

    Every write is committed on success and rolled back on failure.
    A category that products still reference cannot be deleted.
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

    async def get_category(self, category_id: int) -> CategoryResult:
        """Get a category by ID.

        Args:
            category_id: Category identifier.

        Returns:
            CategoryResult with the category if found.
        """
        self.logger.info("Fetching category", category_id=category_id)

        try:
            category = await self.uow.categories.get_by_id(category_id)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error fetching category", category_id=category_id)
            return CategoryResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to fetch category"
            )

        if category is None:
            error = CategoryNotFoundError(category_id)
            self.logger.warning("Category not found", category_id=category_id)
            return CategoryResult.failure(ErrorCode.CATEGORY_NOT_FOUND, error.message)

        return CategoryResult(category=category)

    async def list_categories(
        self,
        page_number: int = 1,
        page_size: int = 10,
    ) -> CategoryListResult:
        """List one page of categories ordered by ID.

        Args:
            page_number: Page number (1-based).
            page_size: Items per page.

        Returns:
            CategoryListResult with the page.
        """
        self.logger.info(
            "Fetching paginated categories",
            page_number=page_number,
            page_size=page_size,
        )

        try:
            page = PageRequest(page_number, page_size)
            categories = await self.uow.categories.get_page(page)
        except DomainError as e:
            return CategoryListResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error fetching categories")
            return CategoryListResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to fetch categories"
            )

        self.logger.info("Fetched categories", count=len(categories))
        return CategoryListResult(
            categories=categories,
            page_number=page_number,
            page_size=page_size,
        )

    async def create_category(self, name: str) -> CategoryResult:
        """Create a category.

        Args:
            name: Category name.

        Returns:
            CategoryResult with the created category and its new ID.
        """
        self.logger.info("Creating category", name=name)

        try:
            validate_name(name)
            category = await self.uow.categories.add(name)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning("Category not created", name=name, error=e.message)
            return CategoryResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error creating category", name=name)
            return CategoryResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to create category"
            )

        self.logger.info("Category created", category_id=category.id)
        return CategoryResult(category=category)

    async def update_category(self, category_id: int, name: str) -> CategoryResult:
        """Rename a category.

        Args:
            category_id: Category identifier.
            name: New category name.

        Returns:
            CategoryResult with the updated category.
        """
        self.logger.info("Updating category", category_id=category_id, name=name)

        try:
            existing = await self.uow.categories.get_by_id(category_id)
            if existing is None:
                raise CategoryNotFoundError(category_id)

            existing.name = validate_name(name)
            category = await self.uow.categories.update(existing)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning(
                "Category not updated", category_id=category_id, error=e.message
            )
            return CategoryResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error updating category", category_id=category_id)
            return CategoryResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to update category"
            )

        self.logger.info("Category updated", category_id=category_id)
        return CategoryResult(category=category)

    async def delete_category(self, category_id: int) -> CategoryResult:
        """Delete a category no product links to.

        Args:
            category_id: Category identifier.

        Returns:
            CategoryResult with a snapshot of the deleted category.
        """
        self.logger.info("Deleting category", category_id=category_id)

        try:
            existing = await self.uow.categories.get_by_id(category_id)
            if existing is None:
                raise CategoryNotFoundError(category_id)

            product_count = await self.uow.products.count_by_category(category_id)
            if product_count > 0:
                raise CategoryInUseError(category_id, product_count)

            snapshot = Category(id=existing.id, name=existing.name)
            await self.uow.categories.remove(category_id)
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            self.logger.warning(
                "Category not deleted", category_id=category_id, error=e.message
            )
            return CategoryResult.failure(error_code_for(e), e.message)
        except SQLAlchemyError:
            await self.uow.rollback()
            self.logger.exception("Error deleting category", category_id=category_id)
            return CategoryResult.failure(
                ErrorCode.INTERNAL_ERROR, "Failed to delete category"
            )

        self.logger.info("Category deleted", category_id=category_id)
        return CategoryResult(category=snapshot)
