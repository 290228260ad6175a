"""Query translation.

Turns the canonical FilterState into the exact parameters the product
listing endpoint expects. The result doubles as the request's debug log
entry, so it must be deterministic and free of side effects.
"""

from typing import Any

from shopfront.domain.filters import (
    OPEN_ENDED_TOKEN,
    PRICE_RANGE_SEPARATOR,
    FilterState,
    PriceRange,
)


def split_price_range(token: str) -> tuple[str, str | None] | None:
    """Decompose a price bracket into lower and upper bounds.

    Args:
        token: Bracket token such as "300-1000" or "5000-above".

    Returns:
        ``(low, high)`` with ``high`` None for open-ended brackets, or
        None when the token is empty or not a known bracket.
    """
    bracket = PriceRange.parse(token)
    if bracket is None or bracket is PriceRange.ALL:
        return None
    low, high = bracket.value.split(PRICE_RANGE_SEPARATOR, 1)
    if high == OPEN_ENDED_TOKEN:
        return low, None
    return low, high


def translate(filters: FilterState) -> dict[str, Any]:
    """Build listing request parameters from a filter state.

    Empty text fields are left out rather than sent as empty strings.
    A price bracket takes precedence over explicit min/max overrides; an
    unknown bracket sends no price bounds at all.

    Example:
        >>> translate(FilterState(price_range="5000-above"))
        {'minPrice': '5000', 'page': 1, 'limit': 12}

    Args:
        filters: Filter state to translate.

    Returns:
        Request parameters in the listing API's naming.
    """
    params: dict[str, Any] = {}

    if filters.search:
        params["search"] = filters.search
    if filters.category:
        params["category"] = filters.category
    if filters.brand:
        params["brand"] = filters.brand

    if filters.price_range:
        bounds = split_price_range(filters.price_range)
        if bounds is not None:
            low, high = bounds
            params["minPrice"] = low
            if high is not None:
                params["maxPrice"] = high
    else:
        if filters.min_price:
            params["minPrice"] = filters.min_price
        if filters.max_price:
            params["maxPrice"] = filters.max_price

    params["page"] = filters.page
    params["limit"] = filters.limit
    return params
