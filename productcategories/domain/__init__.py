"""Domain layer - Entities, association rules and domain exceptions.

Example usage:
    from productcategories.domain import validate_category_count

    validate_category_count([1, 2])     # ok
    validate_category_count([1])        # raises InvalidCategoryCountError
"""

from productcategories.domain.entities import (
    MAX_CATEGORIES,
    MIN_CATEGORIES,
    NAME_MAX_LENGTH,
    Category,
    Product,
    ensure_distinct,
    validate_category_count,
    validate_name,
)
from productcategories.domain.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DomainError,
    EntityNotFoundError,
    InvalidCategoryCountError,
    InvalidCategoryError,
    InvalidNameError,
    InvalidPaginationError,
    ProductNotFoundError,
)

__all__ = [
    # Entities
    "Category",
    "Product",
    # Rules
    "MAX_CATEGORIES",
    "MIN_CATEGORIES",
    "NAME_MAX_LENGTH",
    "ensure_distinct",
    "validate_category_count",
    "validate_name",
    # Exceptions
    "CategoryInUseError",
    "CategoryNotFoundError",
    "DomainError",
    "EntityNotFoundError",
    "InvalidCategoryCountError",
    "InvalidCategoryError",
    "InvalidNameError",
    "InvalidPaginationError",
    "ProductNotFoundError",
]
