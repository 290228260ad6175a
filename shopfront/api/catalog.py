"""Catalog listing endpoints.

Read-only product, category and brand listings consumed by the catalog
view. Pagination arithmetic happens here; clients echo it verbatim.
"""

from decimal import Decimal
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from shopfront.api.schemas import (
    BrandListResponse,
    CategoryListResponse,
    ErrorResponse,
    ProductListResponse,
    ProductSchema,
)
from shopfront.catalog.store import CatalogStore, get_catalog_store
from shopfront.infrastructure.config import settings

router = APIRouter()
logger = structlog.get_logger()


# ============================================================================
# Dependencies
# ============================================================================


def get_store() -> CatalogStore:
    """Get catalog store dependency."""
    return get_catalog_store(
        seed=settings.catalog_seed,
        products_per_category=settings.products_per_category,
    )


# ============================================================================
# Product Endpoints
# ============================================================================


@router.get("/products", response_model=ProductListResponse, tags=["Products"])
async def list_products(
    store: Annotated[CatalogStore, Depends(get_store)],
    search: Annotated[str | None, Query(max_length=200)] = None,
    category: Annotated[str | None, Query(max_length=64)] = None,
    brand: Annotated[str | None, Query(max_length=64)] = None,
    min_price: Annotated[Decimal | None, Query(alias="minPrice", ge=0)] = None,
    max_price: Annotated[Decimal | None, Query(alias="maxPrice", ge=0)] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 12,
) -> ProductListResponse:
    """List products with filtering and pagination.

    Args:
        search: Case-insensitive match on name or description.
        category: Category ID.
        brand: Brand ID.
        min_price: Minimum price in dollars.
        max_price: Maximum price in dollars.
        page: Page number (1-based).
        limit: Items per page.

    Returns:
        Products and pagination summary.
    """
    products, pagination = store.list_products(
        page=page,
        limit=limit,
        search=search,
        category=category,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
    )

    logger.info(
        "Products listed",
        total=pagination.total,
        page=page,
        limit=limit,
    )

    return ProductListResponse(products=products, pagination=pagination)


@router.get(
    "/products/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    tags=["Products"],
)
async def get_product(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> ProductSchema:
    """Get product details by ID.

    Raises:
        HTTPException: If product not found.
    """
    product = store.get_product(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": f"Product not found: {product_id}",
            },
        )
    return product


# ============================================================================
# Lookup Endpoints
# ============================================================================


@router.get("/categories", response_model=CategoryListResponse, tags=["Lookups"])
async def list_categories(
    store: Annotated[CatalogStore, Depends(get_store)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 100,
) -> CategoryListResponse:
    """List categories for the filter dropdown."""
    categories, pagination = store.list_categories(page=page, limit=limit)
    return CategoryListResponse(categories=categories, pagination=pagination)


@router.get("/brands", response_model=BrandListResponse, tags=["Lookups"])
async def list_brands(
    store: Annotated[CatalogStore, Depends(get_store)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 100,
) -> BrandListResponse:
    """List brands for the filter dropdown."""
    brands, pagination = store.list_brands(page=page, limit=limit)
    return BrandListResponse(brands=brands, pagination=pagination)
