"""Domain exceptions.

Errors raised when a caller asks the catalog or the cart for something
the domain rules forbid. Bad input arriving from the URL or from the
network is not an error at this level; it is ignored or reported by the
layer that received it.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog browsing errors."""

    pass


class InvalidFilterError(CatalogError):
    """Raised when a filter control supplies a key or value it cannot hold."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        """Initialize invalid filter error.

        Args:
            key: Filter field that was edited.
            value: The rejected value.
            reason: Explanation of why the value is rejected.
        """
        super().__init__(
            f"Invalid value {value!r} for filter '{key}': {reason}",
            details={"key": key, "value": value, "reason": reason},
        )


class InvalidPageError(CatalogError):
    """Raised when a page jump targets a page outside the result set."""

    def __init__(self, page: int, pages: int) -> None:
        """Initialize invalid page error.

        Args:
            page: Requested page.
            pages: Total number of pages available.
        """
        super().__init__(
            f"Page {page} is outside 1..{pages}",
            details={"page": page, "pages": pages},
        )


# ============================================================================
# Cart Errors
# ============================================================================


class CartError(DomainError):
    """Base class for cart-related errors."""

    pass


class CartItemNotFoundError(CartError):
    """Raised when a cart item is not found."""

    def __init__(self, product_id: str) -> None:
        """Initialize cart item not found error.

        Args:
            product_id: ID of the product that is not in the cart.
        """
        super().__init__(
            f"Product {product_id} is not in the cart",
            details={"product_id": product_id},
        )


class InvalidQuantityError(CartError):
    """Raised when an invalid quantity is provided."""

    def __init__(self, quantity: int, reason: str = "Quantity must be positive") -> None:
        """Initialize invalid quantity error.

        Args:
            quantity: The invalid quantity value.
            reason: Explanation of why the quantity is invalid.
        """
        super().__init__(
            f"Invalid quantity {quantity}: {reason}",
            details={"quantity": quantity, "reason": reason},
        )
