"""API schemas for the Products & Categories API.

Pydantic models for request/response validation and serialization,
plus converters from domain entities.
"""

from typing import Annotated

from pydantic import AliasChoices, BaseModel, Field

from productcategories.domain.entities import NAME_MAX_LENGTH, Category, Product

# Largest value a SQLite INTEGER column holds
ID_MAX = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=ID_MAX)]


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryRequest(BaseModel):
    """Request to create or rename a category."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        validation_alias=AliasChoices("name", "Name"),
        description="Category name",
    )


class CategorySchema(BaseModel):
    """Category representation."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to create a product with its categories."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        validation_alias=AliasChoices("name", "Name"),
        description="Product name",
    )
    category_ids: list[EntityId] = Field(
        ...,
        validation_alias=AliasChoices("categoryIds", "category_ids", "CategoryIds"),
        description="IDs of the 2 or 3 categories to link",
    )


class ProductSchema(BaseModel):
    """Product representation with its categories."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    categories: list[CategorySchema] = Field(
        default_factory=list, description="Linked categories"
    )


# ============================================================================
# Converters
# ============================================================================


def category_to_response(category: Category) -> CategorySchema:
    """Convert Category to CategorySchema."""
    return CategorySchema(id=category.id, name=category.name)


def product_to_response(product: Product) -> ProductSchema:
    """Convert Product to ProductSchema."""
    return ProductSchema(
        id=product.id,
        name=product.name,
        categories=[category_to_response(c) for c in product.categories],
    )
