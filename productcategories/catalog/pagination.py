"""Skip/take pagination over ordered results."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from sqlalchemy import Select

from productcategories.domain.exceptions import InvalidPaginationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Pagination parameters.

    Attributes:
        page_number: Page number (1-indexed).
        page_size: Items per page.
    """

    page_number: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page_number < 1 or self.page_size < 1:
            raise InvalidPaginationError(self.page_number, self.page_size)

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


def paginate(items: Iterable[T], page_number: int, page_size: int) -> list[T]:
    """Materialize one page of an ordered sequence.

    Args:
        items: Ordered items.
        page_number: Page number (1-indexed).
        page_size: Items per page.

    Returns:
        Items of the requested page; empty past the end.

    Raises:
        InvalidPaginationError: If page_number or page_size is not positive.
    """
    page = PageRequest(page_number, page_size)
    return list(items)[page.offset : page.offset + page.limit]


def paginate_query(query: Select, page: PageRequest) -> Select:
    """Apply a page window to an ordered select statement."""
    return query.offset(page.offset).limit(page.limit)
