"""Filter source reconciliation.

Three sources compete to set the catalog's filters: a one-shot navigation
intent (e.g. "show this brand" from the brand page), the durable URL query
string, and the filter controls. The reconciler resolves the first two on
every render pass; control edits go through FilterState directly.
"""

from dataclasses import dataclass, field
from enum import Enum

import structlog

from shopfront.application.navigation import Location
from shopfront.domain.filters import (
    DEFAULT_PAGE_SIZE,
    FilterState,
    NavigationIntent,
    is_valid_identifier,
)

logger = structlog.get_logger()

URL_FILTER_KEYS = ("category", "brand")


class FilterSource(str, Enum):
    """Which source drove a reconciliation pass."""

    NONE = "none"
    NAVIGATION_INTENT = "navigation_intent"
    URL = "url"


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of one reconciliation pass.

    Attributes:
        filters: Filter state after the pass.
        source: Source that drove the change, NONE when nothing changed.
        notices: User-facing messages to emit.
        consumed: Intent applied in this pass, to be acknowledged.
    """

    filters: FilterState
    source: FilterSource = FilterSource.NONE
    notices: tuple[str, ...] = field(default_factory=tuple)
    consumed: NavigationIntent | None = None

    @property
    def changed(self) -> bool:
        """True when the pass produced a different filter state."""
        return self.source is not FilterSource.NONE


class SourceReconciler:
    """Merges navigation intent and URL parameters into a FilterState.

    Priority is strict: a pending navigation intent wins and the URL is not
    looked at in that pass. The caller must acknowledge ``consumed`` with
    the routing layer right after applying the result.
    """

    def reconcile(self, filters: FilterState, location: Location) -> Reconciliation:
        """Run one reconciliation pass.

        Args:
            filters: Current filter state.
            location: Current history entry.

        Returns:
            Reconciliation describing the new state and side effects.
        """
        if location.intent is not None:
            return self._apply_intent(filters, location.intent)
        return self._apply_url(filters, location)

    def _apply_intent(self, filters: FilterState, intent: NavigationIntent) -> Reconciliation:
        if intent.is_empty:
            logger.debug("Consuming empty navigation intent", generation=intent.generation)
            return Reconciliation(filters=filters, consumed=intent)

        updated = filters.with_selection(
            category=intent.category_filter,
            brand=intent.brand_filter,
        )
        logger.info(
            "Applying navigation intent",
            generation=intent.generation,
            category=intent.category_filter,
            brand=intent.brand_filter,
        )
        return Reconciliation(
            filters=updated,
            source=FilterSource.NAVIGATION_INTENT,
            notices=tuple(intent.notices()),
            consumed=intent,
        )

    def _apply_url(self, filters: FilterState, location: Location) -> Reconciliation:
        params = location.params
        updates: dict[str, str] = {}

        for key in URL_FILTER_KEYS:
            value = params.get(key)
            if not value:
                continue
            if not is_valid_identifier(value):
                logger.debug("Ignoring malformed URL parameter", key=key, value=value)
                continue
            if value != getattr(filters, key):
                updates[key] = value

        if not updates:
            return Reconciliation(filters=filters)

        updated = filters.with_selection(
            category=updates.get("category", filters.category),
            brand=updates.get("brand", filters.brand),
        )
        logger.info("Applying URL filters", **updates)
        return Reconciliation(filters=updated, source=FilterSource.URL)

    @staticmethod
    def cleared(limit: int = DEFAULT_PAGE_SIZE) -> FilterState:
        """Filter state after "clear all filters", back at the default page size."""
        return FilterState.default(limit)
