"""Tests for domain entities and association rules."""

import pytest

from productcategories.domain import (
    NAME_MAX_LENGTH,
    Category,
    Product,
    ensure_distinct,
    validate_category_count,
    validate_name,
)
from productcategories.domain.exceptions import (
    InvalidCategoryCountError,
    InvalidCategoryError,
    InvalidNameError,
)


class TestValidateName:
    """Tests for name validation."""

    def test_accepts_regular_name(self) -> None:
        assert validate_name("Widget") == "Widget"

    def test_accepts_name_at_max_length(self) -> None:
        name = "x" * NAME_MAX_LENGTH
        assert validate_name(name) == name

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_blank_name(self, name: str) -> None:
        with pytest.raises(InvalidNameError):
            validate_name(name)

    def test_rejects_too_long_name(self) -> None:
        with pytest.raises(InvalidNameError) as exc_info:
            validate_name("x" * (NAME_MAX_LENGTH + 1))
        assert "100" in exc_info.value.message


class TestValidateCategoryCount:
    """Tests for the 2-or-3 category rule."""

    @pytest.mark.parametrize("ids", [[1, 2], [1, 2, 3]])
    def test_accepts_two_or_three(self, ids: list[int]) -> None:
        validate_category_count(ids)

    @pytest.mark.parametrize("ids", [[], [1], [1, 2, 3, 4]])
    def test_rejects_other_counts(self, ids: list[int]) -> None:
        with pytest.raises(InvalidCategoryCountError) as exc_info:
            validate_category_count(ids)
        assert exc_info.value.details["count"] == len(ids)


class TestEnsureDistinct:
    """Tests for duplicate category detection."""

    def test_accepts_distinct_ids(self) -> None:
        ensure_distinct([1, 2, 3])

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(InvalidCategoryError) as exc_info:
            ensure_distinct([1, 1])
        assert exc_info.value.details["category_ids"] == [1, 1]


class TestProduct:
    """Tests for the Product entity."""

    def test_category_ids(self) -> None:
        product = Product(
            id=1,
            name="Widget",
            categories=[Category(id=1, name="A"), Category(id=3, name="C")],
        )
        assert product.category_ids == [1, 3]

    def test_to_dict(self) -> None:
        product = Product(id=7, name="Widget", categories=[Category(id=1, name="A")])
        assert product.to_dict() == {
            "id": 7,
            "name": "Widget",
            "categories": [{"id": 1, "name": "A"}],
        }
