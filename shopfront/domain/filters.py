"""Filter state for the product catalog.

The catalog view holds exactly one FilterState at a time and replaces it
on every transition. Because the state is a frozen value object, "did the
query change?" is a plain equality check.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Self

from shopfront.domain.base import ValueObject
from shopfront.domain.exceptions import InvalidFilterError


# ============================================================================
# Constants
# ============================================================================

DEFAULT_PAGE_SIZE = 12
PAGE_SIZE_OPTIONS = (12, 24, 48)

# Opaque identifiers accepted from the URL; anything else is ignored.
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

PRICE_RANGE_SEPARATOR = "-"
OPEN_ENDED_TOKEN = "above"


class PriceRange(str, Enum):
    """Fixed price brackets offered by the price filter."""

    ALL = ""
    UP_TO_300 = "0-300"
    FROM_300_TO_1000 = "300-1000"
    FROM_1000_TO_5000 = "1000-5000"
    FROM_5000 = "5000-above"

    @property
    def label(self) -> str:
        """Human-readable label shown in the price dropdown."""
        return PRICE_RANGE_LABELS[self]

    @classmethod
    def parse(cls, token: str) -> "PriceRange | None":
        """Look up a bracket by its token.

        Args:
            token: Range token such as "300-1000".

        Returns:
            Matching PriceRange, or None for unknown tokens.
        """
        try:
            return cls(token)
        except ValueError:
            return None


PRICE_RANGE_LABELS: dict[PriceRange, str] = {
    PriceRange.ALL: "All Prices",
    PriceRange.UP_TO_300: "$0 - $300",
    PriceRange.FROM_300_TO_1000: "$300 - $1,000",
    PriceRange.FROM_1000_TO_5000: "$1,000 - $5,000",
    PriceRange.FROM_5000: "$5,000 & Above",
}


def is_valid_identifier(value: Any) -> bool:
    """Check whether a value can be used as a category or brand filter."""
    return isinstance(value, str) and bool(IDENTIFIER_PATTERN.match(value))


def _is_price(value: str) -> bool:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return False
    return amount.is_finite() and amount >= 0


# ============================================================================
# Filter State
# ============================================================================


@dataclass(frozen=True)
class FilterState(ValueObject):
    """Canonical representation of the active product query.

    Attributes:
        search: Free text matched against product name and description.
        category: Category identifier, empty for all categories.
        brand: Brand identifier, empty for all brands.
        price_range: Price bracket token, empty for all prices.
        min_price: Explicit lower price bound, used only without a bracket.
        max_price: Explicit upper price bound, used only without a bracket.
        page: 1-based page number.
        limit: Page size.
    """

    search: str = ""
    category: str = ""
    brand: str = ""
    price_range: str = ""
    min_price: str = ""
    max_price: str = ""
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    EDITABLE_KEYS = frozenset(
        {"search", "category", "brand", "price_range", "min_price", "max_price", "limit"}
    )

    @classmethod
    def default(cls, limit: int = DEFAULT_PAGE_SIZE) -> Self:
        """Create the filter state a freshly mounted view starts with.

        Args:
            limit: Configured default page size.

        Raises:
            InvalidFilterError: If the page size is not one of the options.
        """
        if limit not in PAGE_SIZE_OPTIONS:
            raise InvalidFilterError("limit", limit, f"page size must be one of {PAGE_SIZE_OPTIONS}")
        return cls(limit=limit)

    def with_filter(self, key: str, value: Any) -> Self:
        """Apply a manual edit from the filter controls.

        Every edit goes back to the first page.

        Args:
            key: Editable field name.
            value: New value for the field.

        Returns:
            New FilterState with the edit applied and page reset to 1.

        Raises:
            InvalidFilterError: If the key is not editable or the value is
                not one the control can produce.
        """
        if key not in self.EDITABLE_KEYS:
            raise InvalidFilterError(key, value, "not an editable filter")

        if key == "limit":
            if value not in PAGE_SIZE_OPTIONS:
                raise InvalidFilterError(key, value, f"page size must be one of {PAGE_SIZE_OPTIONS}")
            return replace(self, limit=value, page=1)

        if value is None:
            value = ""
        if not isinstance(value, str):
            raise InvalidFilterError(key, value, "expected a string")

        if key == "price_range" and PriceRange.parse(value) is None:
            raise InvalidFilterError(key, value, "unknown price range")
        if key in ("min_price", "max_price") and value and not _is_price(value):
            raise InvalidFilterError(key, value, "expected a non-negative number")

        return replace(self, **{key: value, "page": 1})

    def with_page(self, page: int) -> Self:
        """Move to another page, leaving every other field untouched."""
        return replace(self, page=page)

    def with_selection(self, category: str, brand: str) -> Self:
        """Replace the category and brand together and go back to page 1."""
        return replace(self, category=category, brand=brand, page=1)

    def has_active_filters(self) -> bool:
        """Check whether any narrowing filter is set."""
        return bool(
            self.search
            or self.category
            or self.brand
            or self.price_range
            or self.min_price
            or self.max_price
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation, suitable for logging.
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


# ============================================================================
# Navigation Intent
# ============================================================================


@dataclass(frozen=True)
class NavigationIntent(ValueObject):
    """One-shot "apply this filter" message attached to a route change.

    The routing layer stamps each intent with a generation number. The
    reconciler acknowledges an intent by generation after applying it,
    after which the routing layer drops it from history.

    Attributes:
        category_filter: Category to filter by, empty when not set.
        category_name: Display name of the category.
        brand_filter: Brand to filter by, empty when not set.
        brand_name: Display name of the brand.
        generation: Stamp assigned by the routing layer.
    """

    category_filter: str = ""
    category_name: str = ""
    brand_filter: str = ""
    brand_name: str = ""
    generation: int = 0

    @classmethod
    def from_state(cls, state: Mapping[str, Any] | None, generation: int = 0) -> Self | None:
        """Build an intent from a route state payload.

        Accepts the payload shape the category and brand pages attach
        (``categoryFilter``/``categoryName``, ``brandFilter``/``brandName``).
        Values that are not usable identifiers are dropped.

        Args:
            state: Route state payload, possibly None.
            generation: Stamp to assign.

        Returns:
            NavigationIntent, or None when there is no payload at all.
        """
        if not state:
            return None

        def text(key: str) -> str:
            value = state.get(key)
            return value if isinstance(value, str) else ""

        category_filter = text("categoryFilter")
        brand_filter = text("brandFilter")
        return cls(
            category_filter=category_filter if is_valid_identifier(category_filter) else "",
            category_name=text("categoryName"),
            brand_filter=brand_filter if is_valid_identifier(brand_filter) else "",
            brand_name=text("brandName"),
            generation=generation,
        )

    def stamped(self, generation: int) -> Self:
        """Return a copy carrying the given generation."""
        return replace(self, generation=generation)

    @property
    def is_empty(self) -> bool:
        """True when the intent names neither a category nor a brand."""
        return not (self.category_filter or self.brand_filter)

    def notices(self) -> list[str]:
        """User-facing messages naming the filter source."""
        messages = []
        if self.category_filter:
            name = self.category_name or self.category_filter
            messages.append(f"Showing products from category: {name}")
        if self.brand_filter:
            name = self.brand_name or self.brand_filter
            messages.append(f"Showing products from brand: {name}")
        return messages
