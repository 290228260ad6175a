"""Catalog fetch cycle.

Translates filters, calls the listing API and applies the result. Fetches
may overlap when filters change quickly; each one is stamped with an
issuance sequence number and only the most recently issued fetch is
allowed to touch the displayed state.
"""

from dataclasses import dataclass, field

import structlog
from pydantic import ValidationError

from shopfront.api.schemas import ProductListResponse
from shopfront.application.notifications import Notifier
from shopfront.application.query import split_price_range, translate
from shopfront.domain.filters import FilterState
from shopfront.domain.pagination import Pagination
from shopfront.domain.products import Product
from shopfront.infrastructure.api_client import APIError, APIResponse, CatalogAPIClient

logger = structlog.get_logger()

FAILURE_MESSAGE = "Failed to load products"


@dataclass(frozen=True)
class CatalogPage:
    """Products and the pagination summary they belong to.

    Both are replaced together so the list never disagrees with its
    own summary.
    """

    products: tuple[Product, ...] = field(default_factory=tuple)
    pagination: Pagination = field(default_factory=Pagination)


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one fetch.

    Attributes:
        sequence: Issuance sequence number of the fetch.
        applied: True when the result replaced the displayed page.
        superseded: True when a newer fetch had been issued meanwhile.
        error: Error of a failed, non-superseded fetch.
    """

    sequence: int
    applied: bool
    superseded: bool = False
    error: APIError | None = None


def parse_listing(response: APIResponse) -> CatalogPage | APIError:
    """Validate a listing response and map it to domain objects.

    Args:
        response: Response from the listing API.

    Returns:
        CatalogPage on success, APIError otherwise.
    """
    if not response.success:
        return response.error or APIError(
            error_code="UNKNOWN_ERROR",
            message="Unknown error",
            status_code=500,
        )

    try:
        payload = ProductListResponse.model_validate(response.data)
    except ValidationError as e:
        return APIError(
            error_code="INVALID_RESPONSE",
            message="Listing response does not match the expected shape",
            status_code=502,
            details={"errors": e.errors(include_url=False)},
        )

    return CatalogPage(
        products=tuple(
            Product.from_dict(item.model_dump(by_alias=True)) for item in payload.products
        ),
        pagination=Pagination(**payload.pagination.model_dump()),
    )


class CatalogFetchCycle:
    """Orchestrates translate, request and apply for the product list.

    Example usage:
        cycle = CatalogFetchCycle(client, notifications)
        outcome = await cycle.fetch(FilterState(search="lamp"))
        if outcome.applied:
            render(cycle.products, cycle.pagination)
    """

    def __init__(self, client: CatalogAPIClient, notifier: Notifier) -> None:
        """Initialize the cycle.

        Args:
            client: Listing API client.
            notifier: Surface for the failure notification.
        """
        self._client = client
        self._notifier = notifier
        self._issued = 0
        self._page = CatalogPage()
        self.loading = False
        self.last_error: APIError | None = None

    @property
    def issued(self) -> int:
        """Sequence number of the most recently issued fetch."""
        return self._issued

    @property
    def page(self) -> CatalogPage:
        """The displayed page."""
        return self._page

    @property
    def products(self) -> tuple[Product, ...]:
        return self._page.products

    @property
    def pagination(self) -> Pagination:
        return self._page.pagination

    def begin(self) -> int:
        """Issue a new sequence number and mark the view as loading.

        Call this at the moment the fetch is decided, before any await, so
        that issuance order matches the order of filter changes.
        """
        self._issued += 1
        self.loading = True
        return self._issued

    async def fetch(self, filters: FilterState, sequence: int | None = None) -> FetchOutcome:
        """Fetch and apply one page of products.

        Args:
            filters: Filter state to query for.
            sequence: Number from ``begin``; a new one is issued when omitted.

        Returns:
            FetchOutcome describing whether the result was applied.
        """
        if sequence is None:
            sequence = self.begin()

        params = translate(filters)
        if filters.price_range and split_price_range(filters.price_range) is None:
            logger.warning("Ignoring unknown price range", price_range=filters.price_range)
        logger.debug("Filters sent to backend", sequence=sequence, params=params)

        response = await self._client.list_products(params)

        if sequence != self._issued:
            logger.debug(
                "Discarding superseded response",
                sequence=sequence,
                latest=self._issued,
                success=response.success,
            )
            return FetchOutcome(sequence=sequence, applied=False, superseded=True)

        self.loading = False
        result = parse_listing(response)

        if isinstance(result, APIError):
            self.last_error = result
            logger.warning(
                "Product listing failed",
                sequence=sequence,
                error_code=result.error_code,
                message=result.message,
            )
            self._notifier.error(FAILURE_MESSAGE)
            return FetchOutcome(sequence=sequence, applied=False, error=result)

        self._page = result
        self.last_error = None
        logger.debug(
            "Product listing applied",
            sequence=sequence,
            count=len(result.products),
            total=result.pagination.total,
        )
        return FetchOutcome(sequence=sequence, applied=True)
