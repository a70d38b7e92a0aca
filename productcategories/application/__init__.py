"""Application layer module.

Contains the application services (use cases) that apply the catalog
rules on top of the repositories.
"""

from productcategories.application.category_service import CategoryService
from productcategories.application.product_service import ProductService
from productcategories.application.results import (
    CategoryListResult,
    CategoryResult,
    ErrorCode,
    ProductListResult,
    ProductResult,
    error_code_for,
)

__all__ = [
    "CategoryService",
    "ProductService",
    "CategoryListResult",
    "CategoryResult",
    "ErrorCode",
    "ProductListResult",
    "ProductResult",
    "error_code_for",
]
