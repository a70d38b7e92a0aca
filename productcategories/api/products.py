"""Product API endpoints.

Provides endpoints for products and their category sets:
- GET /api/product/{id} - product with categories
- GET /api/product - list products (paginated)
- POST /api/product - create a product with 2 or 3 categories
- PATCH /api/product/{id}/Categories - replace the category set
- PATCH /api/product/{id}/Name - rename a product
- DELETE /api/product/{id} - delete a product and its links
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Request

from productcategories.api.dependencies import get_unit_of_work, raise_bad_request
from productcategories.api.schemas import (
    ID_MAX,
    EntityId,
    ErrorResponse,
    ProductCreateRequest,
    ProductSchema,
    product_to_response,
)
from productcategories.application.product_service import ProductService
from productcategories.catalog.unit_of_work import UnitOfWork
from productcategories.domain.entities import NAME_MAX_LENGTH
from productcategories.infrastructure.config import settings

router = APIRouter(prefix="/api/product", tags=["Products"])

ProductId = Annotated[int, Path(ge=1, le=ID_MAX, description="Product identifier")]


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> ProductService:
    """Get product service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return ProductService(uow, request_id=request_id)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: ProductId,
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductSchema:
    """Get a product with its categories.

    Raises:
        HTTPException: 400 if the product does not exist.
    """
    result = await service.get_product(product_id)
    if not result.success or result.product is None:
        raise_bad_request(result.error_code, result.error)

    return product_to_response(result.product)


@router.get(
    "",
    response_model=list[ProductSchema],
    responses={400: {"model": ErrorResponse}},
    summary="List products",
    description="Get one page of products ordered by ID, each with its categories.",
)
async def list_products(
    service: Annotated[ProductService, Depends(get_service)],
    page_number: int = Query(default=1, alias="pageNumber", ge=1, description="Page number"),
    page_size: int = Query(
        default=settings.default_page_size,
        alias="pageSize",
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    ),
) -> list[ProductSchema]:
    """List products with pagination."""
    result = await service.list_products(page_number=page_number, page_size=page_size)
    if not result.success:
        raise_bad_request(result.error_code, result.error)

    return [product_to_response(product) for product in result.products]


@router.post(
    "",
    response_model=ProductSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
    description="Create a product linked to exactly 2 or 3 existing categories.",
)
async def create_product(
    request: ProductCreateRequest,
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductSchema:
    """Create a product.

    Raises:
        HTTPException: 400 if the category count is not 2 or 3, or a
            category does not exist.
    """
    result = await service.create_product(request.name, request.category_ids)
    if not result.success or result.product is None:
        raise_bad_request(result.error_code, result.error)

    return product_to_response(result.product)


@router.patch(
    "/{product_id}/Categories",
    response_model=ProductSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Replace product categories",
    description="Replace the product's whole category set with 2 or 3 existing categories.",
)
@router.patch("/{product_id}/categories", response_model=ProductSchema, include_in_schema=False)
async def update_product_categories(
    product_id: ProductId,
    category_ids: Annotated[list[EntityId], Body(description="IDs of the new category set")],
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductSchema:
    """Replace a product's categories.

    Raises:
        HTTPException: 400 if the product does not exist, the count is
            not 2 or 3, or an ID is unknown or repeated.
    """
    result = await service.update_product_categories(product_id, category_ids)
    if not result.success or result.product is None:
        raise_bad_request(result.error_code, result.error)

    return product_to_response(result.product)


@router.patch(
    "/{product_id}/Name",
    response_model=ProductSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Rename product",
)
@router.patch("/{product_id}/name", response_model=ProductSchema, include_in_schema=False)
async def update_product_name(
    product_id: ProductId,
    name: Annotated[
        str,
        Body(min_length=1, max_length=NAME_MAX_LENGTH, description="New product name"),
    ],
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductSchema:
    """Rename a product.

    Raises:
        HTTPException: 400 if the product does not exist.
    """
    result = await service.update_product_name(product_id, name)
    if not result.success or result.product is None:
        raise_bad_request(result.error_code, result.error)

    return product_to_response(result.product)


@router.delete(
    "/{product_id}",
    response_model=ProductSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Delete product",
    description="Delete a product together with its category links.",
)
async def delete_product(
    product_id: ProductId,
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductSchema:
    """Delete a product and return what was deleted.

    Raises:
        HTTPException: 400 if the product does not exist.
    """
    result = await service.delete_product(product_id)
    if not result.success or result.product is None:
        raise_bad_request(result.error_code, result.error)

    return product_to_response(result.product)
