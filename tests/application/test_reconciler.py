"""Tests for filter source reconciliation."""

from shopfront.application.navigation import Location
from shopfront.application.reconciler import FilterSource, SourceReconciler
from shopfront.domain import FilterState, NavigationIntent


class TestSourceReconciler:
    """Tests for SourceReconciler."""

    def setup_method(self) -> None:
        self.reconciler = SourceReconciler()

    def test_nothing_to_apply(self) -> None:
        filters = FilterState(search="lamp", page=3)
        outcome = self.reconciler.reconcile(filters, Location(path="/products"))

        assert outcome.filters is filters
        assert outcome.source is FilterSource.NONE
        assert not outcome.changed
        assert outcome.consumed is None

    def test_url_parameters_applied(self) -> None:
        outcome = self.reconciler.reconcile(
            FilterState(search="lamp", page=4),
            Location.from_href("/products?category=c1&brand=b2"),
        )

        assert outcome.source is FilterSource.URL
        assert outcome.filters == FilterState(search="lamp", category="c1", brand="b2", page=1)
        assert outcome.notices == ()

    def test_url_matching_current_state_is_noop(self) -> None:
        filters = FilterState(category="c1", page=2)
        outcome = self.reconciler.reconcile(filters, Location.from_href("/products?category=c1"))

        assert not outcome.changed
        assert outcome.filters.page == 2

    def test_url_only_category_keeps_brand(self) -> None:
        outcome = self.reconciler.reconcile(
            FilterState(brand="b1"),
            Location.from_href("/products?category=c1"),
        )
        assert outcome.filters.category == "c1"
        assert outcome.filters.brand == "b1"

    def test_malformed_url_parameter_ignored(self) -> None:
        outcome = self.reconciler.reconcile(
            FilterState(),
            Location.from_href("/products?category=%3Cscript%3E&brand=b1"),
        )
        assert outcome.filters.category == ""
        assert outcome.filters.brand == "b1"

    def test_intent_wins_over_url(self) -> None:
        """A pending intent is applied and the URL is ignored in that pass."""
        intent = NavigationIntent(brand_filter="B1", brand_name="Acme", generation=7)
        location = Location.from_href("/products?category=C9", intent=intent)

        outcome = self.reconciler.reconcile(FilterState(category="C9", page=2), location)

        assert outcome.source is FilterSource.NAVIGATION_INTENT
        assert outcome.filters.category == ""
        assert outcome.filters.brand == "B1"
        assert outcome.filters.page == 1
        assert outcome.notices == ("Showing products from brand: Acme",)
        assert outcome.consumed == intent

    def test_intent_keeps_unrelated_filters(self) -> None:
        intent = NavigationIntent(category_filter="c1", category_name="Cameras", generation=1)
        outcome = self.reconciler.reconcile(
            FilterState(search="mirrorless", limit=48),
            Location(path="/products", intent=intent),
        )
        assert outcome.filters == FilterState(search="mirrorless", category="c1", limit=48)

    def test_empty_intent_consumed_without_change(self) -> None:
        intent = NavigationIntent(generation=2)
        filters = FilterState(brand="b1")
        outcome = self.reconciler.reconcile(
            filters, Location.from_href("/products?category=c1", intent=intent)
        )

        assert not outcome.changed
        assert outcome.filters is filters
        assert outcome.consumed == intent

    def test_cleared(self) -> None:
        assert SourceReconciler.cleared() == FilterState.default()
