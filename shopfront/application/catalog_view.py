"""Catalog view controller.

Owns the product listing's FilterState and wires together the reconciler,
the routing layer, the fetch cycle and the notification surface. Every
state mutation is synchronous; a change of FilterState (by value) schedules
a fetch task on the running event loop.
"""

import asyncio
from dataclasses import dataclass

import structlog
from pydantic import ValidationError

from shopfront.api.schemas import BrandListResponse, CategoryListResponse
from shopfront.application.cart_service import CartService
from shopfront.application.fetch_cycle import CatalogFetchCycle, FetchOutcome
from shopfront.application.navigation import Location, Navigator
from shopfront.application.notifications import Notifier
from shopfront.application.reconciler import Reconciliation, SourceReconciler
from shopfront.domain.filters import DEFAULT_PAGE_SIZE, FilterState, PriceRange
from shopfront.domain.pagination import PageAction, PageLink, Pagination
from shopfront.domain.products import CatalogRef, Product, find_name
from shopfront.infrastructure.api_client import APIResponse, CatalogAPIClient

logger = structlog.get_logger()


@dataclass(frozen=True)
class FilterTag:
    """An "active filter" chip that can be removed on its own.

    Attributes:
        key: Filter field the tag clears when removed.
        label: Display text.
    """

    key: str
    label: str


class CatalogView:
    """The product listing page, minus rendering.

    Example usage:
        view = CatalogView(client, navigator, notifications, cart)
        await view.mount()
        view.set_filter("price_range", "300-1000")
        await view.settle()
        print(view.results_summary(), [str(p) for p in view.page_strip()])
    """

    def __init__(
        self,
        client: CatalogAPIClient,
        navigator: Navigator,
        notifier: Notifier,
        cart: CartService | None = None,
        listing_path: str = "/products",
        lookup_limit: int = 100,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        reconciler: SourceReconciler | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            client: Listing API client.
            navigator: Routing layer supplying locations and intents.
            notifier: Notification surface.
            cart: Shared cart handle.
            listing_path: Route of the listing page.
            lookup_limit: Categories and brands loaded for the dropdowns.
            default_page_size: Page size the view starts with and clears back to.
            reconciler: Source reconciler, a default one when omitted.
        """
        self._client = client
        self._navigator = navigator
        self._notifier = notifier
        self._cart = cart
        self._reconciler = reconciler or SourceReconciler()
        self._cycle = CatalogFetchCycle(client, notifier)
        self._filters = FilterState.default(default_page_size)
        self._tasks: set[asyncio.Task[FetchOutcome]] = set()
        self._unsubscribe = None
        self.listing_path = listing_path
        self.lookup_limit = lookup_limit
        self.default_page_size = default_page_size
        self.categories: list[CatalogRef] = []
        self.brands: list[CatalogRef] = []

    # =========================================================================
    # State
    # =========================================================================

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def products(self) -> tuple[Product, ...]:
        return self._cycle.products

    @property
    def pagination(self) -> Pagination:
        return self._cycle.pagination

    @property
    def loading(self) -> bool:
        return self._cycle.loading

    @property
    def fetch_cycle(self) -> CatalogFetchCycle:
        return self._cycle

    @property
    def is_mounted(self) -> bool:
        return self._unsubscribe is not None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def mount(self) -> None:
        """Start listening to navigation, load lookups and fetch.

        The first fetch always runs, even when the reconciliation pass
        leaves the default filters in place.
        """
        self._unsubscribe = self._navigator.subscribe(self._on_location_change)
        await self.load_lookups()
        issued = self._cycle.issued
        self.sync_location()
        if self._cycle.issued == issued:
            self._schedule_fetch()
        logger.info("Catalog view mounted", filters=self._filters.to_dict())

    def unmount(self) -> None:
        """Stop listening to navigation. In-flight fetches still resolve."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def settle(self) -> None:
        """Wait until every scheduled fetch has resolved."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def load_lookups(self) -> None:
        """Load categories and brands for the filter dropdowns.

        Failures are logged and leave the previous lists in place.
        """
        categories, brands = await asyncio.gather(
            self._client.list_categories(limit=self.lookup_limit),
            self._client.list_brands(limit=self.lookup_limit),
        )
        parsed = self._parse_lookup(categories, CategoryListResponse, "categories")
        if parsed is not None:
            self.categories = parsed
        parsed = self._parse_lookup(brands, BrandListResponse, "brands")
        if parsed is not None:
            self.brands = parsed

    @staticmethod
    def _parse_lookup(
        response: APIResponse,
        schema: type[CategoryListResponse] | type[BrandListResponse],
        key: str,
    ) -> list[CatalogRef] | None:
        if not response.success:
            logger.error(
                f"Failed to load {key}",
                error_code=response.error.error_code if response.error else None,
            )
            return None
        try:
            payload = schema.model_validate(response.data)
        except ValidationError as e:
            logger.error(f"Failed to load {key}", error=str(e))
            return None
        return [
            CatalogRef(id=ref.id, name=ref.name, description=ref.description or "")
            for ref in getattr(payload, key)
        ]

    # =========================================================================
    # Reconciliation
    # =========================================================================

    def _on_location_change(self, location: Location) -> None:
        if location.path == self.listing_path:
            self.sync_location()

    def sync_location(self) -> Reconciliation:
        """Run one reconciliation pass against the current location.

        Applies the outcome, emits its notices and acknowledges a consumed
        navigation intent so it is never applied again.
        """
        outcome = self._reconciler.reconcile(self._filters, self._navigator.location)
        self._set_filters(outcome.filters)
        for notice in outcome.notices:
            self._notifier.info(notice)
        if outcome.consumed is not None:
            self._navigator.acknowledge(outcome.consumed)
        return outcome

    # =========================================================================
    # Filter controls
    # =========================================================================

    def set_filter(self, key: str, value: object) -> bool:
        """Apply a filter control edit; always returns to page 1.

        Raises:
            InvalidFilterError: If the control value is not acceptable.
        """
        return self._set_filters(self._filters.with_filter(key, value))

    def set_page_size(self, limit: int) -> bool:
        return self.set_filter("limit", limit)

    def remove_filter(self, key: str) -> bool:
        """Remove one active filter tag."""
        return self.set_filter(key, "")

    def clear_filters(self) -> bool:
        """Reset every filter and drop the query string from the route."""
        changed = self._set_filters(self._reconciler.cleared(self.default_page_size))
        self._navigator.replace(self.listing_path)
        return changed

    def go_to_page(self, page: int) -> bool:
        """Jump to a numbered page.

        Raises:
            InvalidPageError: If the page does not exist.
        """
        self.pagination.validate_jump(page)
        return self._set_filters(self._filters.with_page(page))

    def page_action(self, action: PageAction) -> bool:
        """Follow a first/prev/next/last button.

        Returns:
            False when the button is disabled and nothing changed.
        """
        target = self.pagination.target(action)
        if target is None:
            return False
        return self._set_filters(self._filters.with_page(target))

    def _set_filters(self, filters: FilterState) -> bool:
        if filters == self._filters:
            return False
        self._filters = filters
        self._schedule_fetch()
        return True

    def _schedule_fetch(self) -> None:
        sequence = self._cycle.begin()
        task = asyncio.get_running_loop().create_task(
            self._cycle.fetch(self._filters, sequence=sequence)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    # =========================================================================
    # Display helpers
    # =========================================================================

    def page_strip(self) -> list[PageLink]:
        """Page-number strip, empty when there is a single page."""
        if not self.pagination.is_visible:
            return []
        return self.pagination.strip()

    def results_summary(self) -> str:
        return self.pagination.summary(len(self.products))

    def active_filter_tags(self) -> list[FilterTag]:
        """Chips for every active filter, with names resolved.

        Empty when no narrowing filter is set, which also hides "clear all".
        """
        filters = self._filters
        if not filters.has_active_filters():
            return []
        tags = []
        if filters.search:
            tags.append(FilterTag("search", f'Search: "{filters.search}"'))
        if filters.category:
            name = find_name(self.categories, filters.category) or filters.category
            tags.append(FilterTag("category", f"Category: {name}"))
        if filters.brand:
            name = find_name(self.brands, filters.brand) or filters.brand
            tags.append(FilterTag("brand", f"Brand: {name}"))
        if filters.price_range:
            bracket = PriceRange.parse(filters.price_range)
            label = bracket.label if bracket else filters.price_range
            tags.append(FilterTag("price_range", f"Price: {label}"))
        return tags

    # =========================================================================
    # Cart
    # =========================================================================

    def add_to_cart(self, product: Product, quantity: int = 1) -> int:
        """Add a listed product to the shared cart.

        Returns:
            Units of the product now in the cart.
        """
        if self._cart is None:
            raise RuntimeError("Catalog view was created without a cart")
        return self._cart.add_to_cart(product, quantity).quantity

    def cart_quantity(self, product_id: str) -> int:
        if self._cart is None:
            return 0
        return self._cart.get_item_quantity(product_id)
