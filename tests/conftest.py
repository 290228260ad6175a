"""Pytest configuration and fixtures for the catalog tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from shopfront.application.cart_service import CartService
from shopfront.application.navigation import Navigator
from shopfront.application.notifications import NotificationCenter
from shopfront.infrastructure.api_client import APIError, APIResponse, CatalogAPIClient


def make_success_response(data: Any) -> APIResponse:
    """Create a successful API response."""
    return APIResponse(success=True, data=data)


def make_error_response(
    error_code: str,
    message: str,
    status_code: int = 400,
) -> APIResponse:
    """Create an error API response."""
    return APIResponse(
        success=False,
        error=APIError(
            error_code=error_code,
            message=message,
            status_code=status_code,
        ),
    )


def make_product(product_id: str = "p1", **overrides: Any) -> dict[str, Any]:
    """Create a product payload as the listing API returns it."""
    product = {
        "id": product_id,
        "name": f"Product {product_id}",
        "description": "A product",
        "price": 100.0,
        "discount": 0,
        "discountPrice": None,
        "category": {"id": "c1", "name": "Cameras"},
        "brand": {"id": "b1", "name": "Acme"},
        "image": None,
        "stock": 5,
    }
    product.update(overrides)
    return product


def make_listing(
    product_ids: list[str],
    current: int = 1,
    pages: int = 1,
    total: int | None = None,
    limit: int = 12,
) -> dict[str, Any]:
    """Create a product listing payload."""
    return {
        "products": [make_product(pid) for pid in product_ids],
        "pagination": {
            "current": current,
            "pages": pages,
            "total": len(product_ids) if total is None else total,
            "limit": limit,
        },
    }


CATEGORIES = {
    "categories": [
        {"id": "c1", "name": "Cameras"},
        {"id": "C9", "name": "Televisions"},
    ],
    "pagination": {"current": 1, "pages": 1, "total": 2, "limit": 100},
}

BRANDS = {
    "brands": [
        {"id": "B1", "name": "Acme"},
        {"id": "b2", "name": "Globex"},
    ],
    "pagination": {"current": 1, "pages": 1, "total": 2, "limit": 100},
}


@pytest.fixture
def mock_api_client() -> MagicMock:
    """Create a mock listing API client with lookups preloaded."""
    client = MagicMock(spec=CatalogAPIClient)

    client.list_products = AsyncMock(return_value=make_success_response(make_listing(["p1"])))
    client.get_product = AsyncMock()
    client.list_categories = AsyncMock(return_value=make_success_response(CATEGORIES))
    client.list_brands = AsyncMock(return_value=make_success_response(BRANDS))
    client.close = AsyncMock()

    return client


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def navigator() -> Navigator:
    return Navigator("/products")


@pytest.fixture
def cart() -> CartService:
    return CartService()
