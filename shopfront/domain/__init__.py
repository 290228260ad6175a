"""Domain layer - filter state, pagination, products and the cart.

This module exports the core domain building blocks:

- **Filters**: FilterState, PriceRange and the one-shot NavigationIntent
- **Pagination**: the API-reported Pagination model and its page strip
- **Products**: Product, CatalogRef and price formatting
- **Cart**: the client-side Cart aggregate
- **Exceptions**: Domain-specific errors

Example usage:
    from shopfront.domain import FilterState, Pagination

    filters = FilterState.default().with_filter("price_range", "5000-above")
    strip = Pagination(current=3, pages=7, total=84, limit=12).strip()
"""

from shopfront.domain.base import Entity, ValueObject
from shopfront.domain.cart import Cart, CartItem
from shopfront.domain.exceptions import (
    CartError,
    CartItemNotFoundError,
    CatalogError,
    DomainError,
    InvalidFilterError,
    InvalidPageError,
    InvalidQuantityError,
)
from shopfront.domain.filters import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    FilterState,
    NavigationIntent,
    PriceRange,
)
from shopfront.domain.pagination import ELLIPSIS, PageAction, PageLink, Pagination
from shopfront.domain.products import CatalogRef, Product, find_name, format_price

__all__ = [
    # Base
    "Entity",
    "ValueObject",
    # Filters
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
    "FilterState",
    "NavigationIntent",
    "PriceRange",
    # Pagination
    "ELLIPSIS",
    "PageAction",
    "PageLink",
    "Pagination",
    # Products
    "CatalogRef",
    "Product",
    "find_name",
    "format_price",
    # Cart
    "Cart",
    "CartItem",
    # Exceptions
    "CartError",
    "CartItemNotFoundError",
    "CatalogError",
    "DomainError",
    "InvalidFilterError",
    "InvalidPageError",
    "InvalidQuantityError",
]
