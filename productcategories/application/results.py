"""Service result types.

Every service operation returns one of these instead of raising, so
callers branch on ``success`` and read ``error_code``/``error`` on
failure.
"""

from dataclasses import dataclass, field
from enum import Enum

from productcategories.domain.entities import Category, Product
from productcategories.domain.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DomainError,
    InvalidCategoryCountError,
    InvalidCategoryError,
    InvalidNameError,
    InvalidPaginationError,
    ProductNotFoundError,
)


class ErrorCode(str, Enum):
    """Machine-readable failure kinds."""

    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    INVALID_CATEGORY_COUNT = "INVALID_CATEGORY_COUNT"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_NAME = "INVALID_NAME"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    CATEGORY_IN_USE = "CATEGORY_IN_USE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_ERROR_CODES: dict[type[DomainError], ErrorCode] = {
    CategoryNotFoundError: ErrorCode.CATEGORY_NOT_FOUND,
    ProductNotFoundError: ErrorCode.PRODUCT_NOT_FOUND,
    InvalidCategoryCountError: ErrorCode.INVALID_CATEGORY_COUNT,
    InvalidCategoryError: ErrorCode.INVALID_CATEGORY,
    InvalidNameError: ErrorCode.INVALID_NAME,
    InvalidPaginationError: ErrorCode.INVALID_PAGINATION,
    CategoryInUseError: ErrorCode.CATEGORY_IN_USE,
}


def error_code_for(error: DomainError) -> ErrorCode:
    """Map a domain exception to its error code."""
    return _ERROR_CODES.get(type(error), ErrorCode.INTERNAL_ERROR)


@dataclass
class CategoryResult:
    """Result of a single-category operation."""

    category: Category | None = None
    success: bool = True
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def failure(cls, error_code: ErrorCode, error: str) -> "CategoryResult":
        """Build a failed result."""
        return cls(success=False, error=error, error_code=error_code)


@dataclass
class CategoryListResult:
    """Result of listing categories."""

    categories: list[Category] = field(default_factory=list)
    page_number: int = 1
    page_size: int = 10
    success: bool = True
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def failure(cls, error_code: ErrorCode, error: str) -> "CategoryListResult":
        """Build a failed result."""
        return cls(success=False, error=error, error_code=error_code)


@dataclass
class ProductResult:
    """Result of a single-product operation."""

    product: Product | None = None
    success: bool = True
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def failure(cls, error_code: ErrorCode, error: str) -> "ProductResult":
        """Build a failed result."""
        return cls(success=False, error=error, error_code=error_code)


@dataclass
class ProductListResult:
    """Result of listing products."""

    products: list[Product] = field(default_factory=list)
    page_number: int = 1
    page_size: int = 10
    success: bool = True
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def failure(cls, error_code: ErrorCode, error: str) -> "ProductListResult":
        """Build a failed result."""
        return cls(success=False, error=error, error_code=error_code)
