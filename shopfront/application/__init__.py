"""Application layer - catalog view, reconciliation and fetch orchestration.

Services:
- SourceReconciler: merges navigation intent and URL parameters into filters
- CatalogFetchCycle: translate, request, apply with issuance ordering
- CatalogView: owns the listing page's filter state
- CartService: shared cart handle
- AppContext: application-wide handles and their lifecycle
"""

from shopfront.application.cart_service import CartService
from shopfront.application.catalog_view import CatalogView, FilterTag
from shopfront.application.context import AppContext
from shopfront.application.fetch_cycle import (
    FAILURE_MESSAGE,
    CatalogFetchCycle,
    CatalogPage,
    FetchOutcome,
)
from shopfront.application.navigation import Location, Navigator
from shopfront.application.notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
)
from shopfront.application.query import split_price_range, translate
from shopfront.application.reconciler import FilterSource, Reconciliation, SourceReconciler

__all__ = [
    "AppContext",
    "CartService",
    "CatalogFetchCycle",
    "CatalogPage",
    "CatalogView",
    "FAILURE_MESSAGE",
    "FetchOutcome",
    "FilterSource",
    "FilterTag",
    "Location",
    "Navigator",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "Reconciliation",
    "SourceReconciler",
    "split_price_range",
    "translate",
]
