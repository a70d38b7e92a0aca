"""Category API endpoints.

Provides CRUD endpoints for categories:
- GET /api/category/{id} - category details
- GET /api/category - list categories (paginated)
- POST /api/category - create a category
- PUT /api/category/{id} - rename a category
- DELETE /api/category/{id} - delete an unused category
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request

from productcategories.api.dependencies import get_unit_of_work, raise_bad_request
from productcategories.api.schemas import (
    ID_MAX,
    CategoryRequest,
    CategorySchema,
    ErrorResponse,
    category_to_response,
)
from productcategories.application.category_service import CategoryService
from productcategories.catalog.unit_of_work import UnitOfWork
from productcategories.infrastructure.config import settings

router = APIRouter(prefix="/api/category", tags=["Categories"])

CategoryId = Annotated[int, Path(ge=1, le=ID_MAX, description="Category identifier")]


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> CategoryService:
    """Get category service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return CategoryService(uow, request_id=request_id)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/{category_id}",
    response_model=CategorySchema,
    responses={400: {"model": ErrorResponse}},
    summary="Get category",
)
async def get_category(
    category_id: CategoryId,
    service: Annotated[CategoryService, Depends(get_service)],
) -> CategorySchema:
    """Get a category by ID.

    Raises:
        HTTPException: 400 if the category does not exist.
    """
    result = await service.get_category(category_id)
    if not result.success or result.category is None:
        raise_bad_request(result.error_code, result.error)

    return category_to_response(result.category)


@router.get(
    "",
    response_model=list[CategorySchema],
    responses={400: {"model": ErrorResponse}},
    summary="List categories",
    description="Get one page of categories ordered by ID.",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_service)],
    page_number: int = Query(default=1, alias="pageNumber", ge=1, description="Page number"),
    page_size: int = Query(
        default=settings.default_page_size,
        alias="pageSize",
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    ),
) -> list[CategorySchema]:
    """List categories with pagination."""
    result = await service.list_categories(page_number=page_number, page_size=page_size)
    if not result.success:
        raise_bad_request(result.error_code, result.error)

    return [category_to_response(category) for category in result.categories]


@router.post(
    "",
    response_model=CategorySchema,
    responses={400: {"model": ErrorResponse}},
    summary="Create category",
)
async def create_category(
    request: CategoryRequest,
    service: Annotated[CategoryService, Depends(get_service)],
) -> CategorySchema:
    """Create a category.

    Raises:
        HTTPException: 400 if the category could not be stored.
    """
    result = await service.create_category(request.name)
    if not result.success or result.category is None:
        raise_bad_request(result.error_code, result.error)

    return category_to_response(result.category)


@router.put(
    "/{category_id}",
    response_model=CategorySchema,
    responses={400: {"model": ErrorResponse}},
    summary="Rename category",
)
async def update_category(
    category_id: CategoryId,
    request: CategoryRequest,
    service: Annotated[CategoryService, Depends(get_service)],
) -> CategorySchema:
    """Rename a category.

    Raises:
        HTTPException: 400 if the category does not exist.
    """
    result = await service.update_category(category_id, request.name)
    if not result.success or result.category is None:
        raise_bad_request(result.error_code, result.error)

    return category_to_response(result.category)


@router.delete(
    "/{category_id}",
    response_model=CategorySchema,
    responses={400: {"model": ErrorResponse}},
    summary="Delete category",
    description="Delete a category. Categories still linked to a product cannot be deleted.",
)
async def delete_category(
    category_id: CategoryId,
    service: Annotated[CategoryService, Depends(get_service)],
) -> CategorySchema:
    """Delete a category and return what was deleted.

    Raises:
        HTTPException: 400 if the category does not exist or is in use.
    """
    result = await service.delete_category(category_id)
    if not result.success or result.category is None:
        raise_bad_request(result.error_code, result.error)

    return category_to_response(result.category)
