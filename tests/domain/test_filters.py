"""Tests for filter state and navigation intents."""

import pytest

from shopfront.domain import FilterState, NavigationIntent, PriceRange
from shopfront.domain.exceptions import InvalidFilterError


class TestFilterState:
    """Tests for FilterState value object."""

    def test_defaults(self) -> None:
        """A fresh filter state has no filters, page 1 and 12 per page."""
        filters = FilterState.default()
        assert filters.search == ""
        assert filters.category == ""
        assert filters.brand == ""
        assert filters.price_range == ""
        assert filters.page == 1
        assert filters.limit == 12
        assert not filters.has_active_filters()

    def test_default_with_configured_page_size(self) -> None:
        assert FilterState.default(48) == FilterState(limit=48)
        with pytest.raises(InvalidFilterError):
            FilterState.default(20)

    def test_compared_by_value(self) -> None:
        """Equal fields mean equal states."""
        assert FilterState(search="lamp", page=2) == FilterState(search="lamp", page=2)
        assert FilterState(search="lamp") != FilterState(search="lamps")

    @pytest.mark.parametrize(
        "key, value",
        [
            ("search", "camera"),
            ("category", "c1"),
            ("brand", "b1"),
            ("price_range", "300-1000"),
            ("min_price", "10"),
            ("max_price", "99.5"),
            ("limit", 24),
        ],
    )
    def test_edit_resets_page(self, key: str, value: object) -> None:
        """Every manual edit returns to the first page."""
        filters = FilterState(page=4).with_filter(key, value)
        assert getattr(filters, key) == value
        assert filters.page == 1

    def test_edit_same_value_still_resets_page(self) -> None:
        """Re-selecting the current value goes back to page 1."""
        filters = FilterState(category="c1", page=3).with_filter("category", "c1")
        assert filters == FilterState(category="c1", page=1)

    def test_page_change_keeps_other_fields(self) -> None:
        """Changing page touches nothing else."""
        filters = FilterState(search="x", brand="b1", limit=24, page=1)
        moved = filters.with_page(5)
        assert moved.page == 5
        assert moved.search == "x"
        assert moved.brand == "b1"
        assert moved.limit == 24

    def test_none_clears_text_field(self) -> None:
        """None from a control is treated as an empty value."""
        filters = FilterState(search="x").with_filter("search", None)
        assert filters.search == ""

    def test_unknown_key_rejected(self) -> None:
        """Only editable keys can be edited."""
        with pytest.raises(InvalidFilterError) as exc_info:
            FilterState().with_filter("page", 3)
        assert exc_info.value.details["key"] == "page"

    def test_unknown_price_range_rejected(self) -> None:
        """Price range must be one of the offered brackets."""
        with pytest.raises(InvalidFilterError):
            FilterState().with_filter("price_range", "1-2")

    @pytest.mark.parametrize("value", ["abc", "-5", "NaN"])
    def test_invalid_price_override_rejected(self, value: str) -> None:
        """Price overrides must be non-negative numbers."""
        with pytest.raises(InvalidFilterError):
            FilterState().with_filter("min_price", value)

    @pytest.mark.parametrize("value", [10, 0, "24"])
    def test_invalid_page_size_rejected(self, value: object) -> None:
        """Page size must be one of the offered options."""
        with pytest.raises(InvalidFilterError):
            FilterState().with_filter("limit", value)

    def test_has_active_filters(self) -> None:
        """Any narrowing field makes the filters active; page and limit do not."""
        assert FilterState(price_range="0-300").has_active_filters()
        assert FilterState(max_price="50").has_active_filters()
        assert not FilterState(page=3, limit=48).has_active_filters()


class TestPriceRange:
    """Tests for the price bracket enumeration."""

    def test_labels(self) -> None:
        assert PriceRange.ALL.label == "All Prices"
        assert PriceRange.FROM_300_TO_1000.label == "$300 - $1,000"
        assert PriceRange.FROM_5000.label == "$5,000 & Above"

    def test_parse(self) -> None:
        assert PriceRange.parse("5000-above") is PriceRange.FROM_5000
        assert PriceRange.parse("") is PriceRange.ALL
        assert PriceRange.parse("bogus") is None


class TestNavigationIntent:
    """Tests for NavigationIntent."""

    def test_from_route_state(self) -> None:
        """Route state payload keys map onto the intent."""
        intent = NavigationIntent.from_state(
            {"brandFilter": "B1", "brandName": "Acme"}, generation=3
        )
        assert intent is not None
        assert intent.brand_filter == "B1"
        assert intent.brand_name == "Acme"
        assert intent.category_filter == ""
        assert intent.generation == 3

    def test_missing_state_is_no_intent(self) -> None:
        assert NavigationIntent.from_state(None) is None
        assert NavigationIntent.from_state({}) is None

    def test_malformed_values_dropped(self) -> None:
        """Non-identifier values are treated as absent."""
        intent = NavigationIntent.from_state(
            {"categoryFilter": "bad id!", "brandFilter": 42}
        )
        assert intent is not None
        assert intent.is_empty

    def test_notices(self) -> None:
        """Notices name the filter source."""
        intent = NavigationIntent(
            category_filter="c1",
            category_name="Cameras",
            brand_filter="B1",
            brand_name="Acme",
        )
        assert intent.notices() == [
            "Showing products from category: Cameras",
            "Showing products from brand: Acme",
        ]
