"""Domain exceptions.

All domain-level errors that represent business rule violations.
These exceptions are raised by entity rules and the pagination helper
when invariants are violated, and are translated into failed service
results at the application layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Lookup Errors
# ============================================================================


class EntityNotFoundError(DomainError):
    """Raised when an entity id does not exist in the store."""

    def __init__(self, entity_type: str, entity_id: int) -> None:
        """Initialize entity not found error.

        Args:
            entity_type: Type of entity (e.g., "Product", "Category").
            entity_id: ID that could not be resolved.
        """
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: int) -> None:
        super().__init__("Product", product_id)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id: int) -> None:
        super().__init__("Category", category_id)


# ============================================================================
# Validation Errors
# ============================================================================


class InvalidNameError(DomainError):
    """Raised when an entity name is empty or too long."""

    def __init__(self, name: str, reason: str) -> None:
        """Initialize invalid name error.

        Args:
            name: The rejected name.
            reason: Explanation of why the name is invalid.
        """
        super().__init__(
            f"Invalid name: {reason}",
            details={"name": name, "reason": reason},
        )


class InvalidCategoryCountError(DomainError):
    """Raised when a product would not have exactly 2 or 3 categories."""

    def __init__(self, count: int, minimum: int, maximum: int) -> None:
        """Initialize invalid category count error.

        Args:
            count: Number of category ids provided.
            minimum: Smallest allowed count.
            maximum: Largest allowed count.
        """
        super().__init__(
            f"Product must have {minimum} or {maximum} categories, got {count}",
            details={"count": count, "minimum": minimum, "maximum": maximum},
        )


class InvalidCategoryError(DomainError):
    """Raised when a category id set contains duplicates or unknown ids."""

    def __init__(self, category_ids: list[int], reason: str = "Invalid category") -> None:
        """Initialize invalid category error.

        Args:
            category_ids: The offending category ids.
            reason: Explanation of what is wrong with them.
        """
        super().__init__(
            reason,
            details={"category_ids": category_ids},
        )


class CategoryInUseError(DomainError):
    """Raised when deleting a category that products still reference."""

    def __init__(self, category_id: int, product_count: int) -> None:
        """Initialize category in use error.

        Args:
            category_id: ID of the category.
            product_count: Number of products linked to it.
        """
        super().__init__(
            f"Category with ID {category_id} is used by {product_count} product(s)",
            details={"category_id": category_id, "product_count": product_count},
        )


class InvalidPaginationError(DomainError):
    """Raised when page number or page size is not positive."""

    def __init__(self, page_number: int, page_size: int) -> None:
        """Initialize invalid pagination error.

        Args:
            page_number: Requested page number.
            page_size: Requested page size.
        """
        super().__init__(
            f"Page number and page size must be positive, got {page_number} and {page_size}",
            details={"page_number": page_number, "page_size": page_size},
        )
