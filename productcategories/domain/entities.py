"""Domain entities and association rules.

Category and Product are plain dataclasses shared by every repository
implementation. The rules below are the single place where the
product/category cardinality and naming constraints are enforced.
"""

from dataclasses import dataclass, field
from typing import Any

from productcategories.domain.exceptions import (
    InvalidCategoryCountError,
    InvalidCategoryError,
    InvalidNameError,
)

NAME_MAX_LENGTH = 100
MIN_CATEGORIES = 2
MAX_CATEGORIES = 3


@dataclass
class Category:
    """A standalone named category.

    Attributes:
        id: Store-assigned identifier.
        name: Category name.
    """

    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name}


@dataclass
class Product:
    """A product with its association set.

    Attributes:
        id: Store-assigned identifier.
        name: Product name.
        categories: Categories currently linked to the product,
            ordered by category id.
    """

    id: int
    name: str
    categories: list[Category] = field(default_factory=list)

    @property
    def category_ids(self) -> list[int]:
        """Ids of the linked categories."""
        return [category.id for category in self.categories]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "categories": [category.to_dict() for category in self.categories],
        }


# ============================================================================
# Rules
# ============================================================================


def validate_name(name: str) -> str:
    """Check that a product or category name is usable.

    Args:
        name: Proposed name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidNameError: If the name is blank or longer than NAME_MAX_LENGTH.
    """
    if not name or not name.strip():
        raise InvalidNameError(name, "Name is required")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidNameError(
            name, f"Name must be at most {NAME_MAX_LENGTH} characters"
        )
    return name


def validate_category_count(category_ids: list[int]) -> None:
    """Check that a product gets exactly 2 or 3 categories.

    Raises:
        InvalidCategoryCountError: If the count is out of range.
    """
    count = len(category_ids)
    if count < MIN_CATEGORIES or count > MAX_CATEGORIES:
        raise InvalidCategoryCountError(count, MIN_CATEGORIES, MAX_CATEGORIES)


def ensure_distinct(category_ids: list[int]) -> None:
    """Reject category id lists that repeat an id.

    Raises:
        InvalidCategoryError: If any id appears more than once.
    """
    if len(set(category_ids)) != len(category_ids):
        raise InvalidCategoryError(
            category_ids, "Invalid category: duplicate category ids"
        )
