"""Application context.

Holds the application-wide handles (API client, routing layer, notification
surface, cart) that views receive explicitly instead of reaching for
globals. Created once at start-up, closed at exit.
"""

from dataclasses import dataclass

import httpx
import structlog

from shopfront.application.cart_service import CartService
from shopfront.application.catalog_view import CatalogView
from shopfront.application.navigation import Navigator
from shopfront.application.notifications import NotificationCenter
from shopfront.infrastructure.api_client import CatalogAPIClient
from shopfront.infrastructure.config import Settings, settings as default_settings

logger = structlog.get_logger()


@dataclass
class AppContext:
    """Application-state handles shared by every view."""

    settings: Settings
    api: CatalogAPIClient
    navigator: Navigator
    notifications: NotificationCenter
    cart: CartService

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        initial_href: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AppContext":
        """Create the context.

        Args:
            settings: Settings to use, the process-wide ones when omitted.
            initial_href: First history entry, the listing path when omitted.
            transport: Optional httpx transport for the API client.

        Returns:
            New AppContext.
        """
        settings = settings or default_settings
        api = CatalogAPIClient(
            base_url=settings.catalog_api_url,
            api_key=settings.catalog_api_key,
            timeout=settings.request_timeout,
            transport=transport,
        )
        logger.info("Application context created", api_url=settings.catalog_api_url)
        return cls(
            settings=settings,
            api=api,
            navigator=Navigator(initial_href or settings.listing_path),
            notifications=NotificationCenter(),
            cart=CartService(),
        )

    def catalog_view(self) -> CatalogView:
        """Build a catalog view bound to this context's handles."""
        return CatalogView(
            client=self.api,
            navigator=self.navigator,
            notifier=self.notifications,
            cart=self.cart,
            listing_path=self.settings.listing_path,
            lookup_limit=self.settings.lookup_limit,
            default_page_size=self.settings.default_page_size,
        )

    async def aclose(self) -> None:
        """Release the HTTP client."""
        await self.api.close()
        logger.info("Application context closed")

    async def __aenter__(self) -> "AppContext":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
