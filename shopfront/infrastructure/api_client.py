"""Listing API client.

Thin HTTP client for the product, category and brand listing endpoints.
This module handles authentication, error handling, and response parsing.
Transport failures are returned as error responses, never raised.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


@dataclass
class APIError:
    """Represents an API error response."""

    error_code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class APIResponse:
    """Represents an API response."""

    success: bool
    data: dict[str, Any] | list[Any] | None = None
    error: APIError | None = None


class CatalogAPIClient:
    """HTTP client for the catalog listing API.

    Provides methods for the listing endpoints the catalog view consumes.
    Handles optional bearer authentication and error normalisation.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Listing API base URL.
            api_key: Optional bearer token.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, e.g. an ASGI transport.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> APIResponse:
        """Make an API request.

        Args:
            method: HTTP method.
            path: API endpoint path.
            params: Query parameters.

        Returns:
            APIResponse with success status and data or error.
        """
        client = await self._get_client()

        # Filter out None params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            logger.debug(
                "Making API request",
                method=method,
                path=path,
                params=params,
            )

            response = await client.request(
                method=method,
                url=path,
                params=params,
            )

            if response.status_code >= 400:
                try:
                    error_data = response.json()
                except ValueError:
                    error_data = {}
                if not isinstance(error_data, dict):
                    error_data = {}
                return APIResponse(
                    success=False,
                    error=APIError(
                        error_code=error_data.get("error_code", "UNKNOWN_ERROR"),
                        message=error_data.get("message", response.reason_phrase or "Unknown error"),
                        status_code=response.status_code,
                        details={"details": error_data.get("details", [])},
                    ),
                )

            return APIResponse(success=True, data=response.json())

        except httpx.TimeoutException as e:
            logger.error("API request timeout", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="TIMEOUT",
                    message=f"Request timed out: {path}",
                    status_code=504,
                ),
            )
        except httpx.RequestError as e:
            logger.error("API request failed", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="REQUEST_ERROR",
                    message=f"Request failed: {str(e)}",
                    status_code=500,
                ),
            )
        except ValueError as e:
            logger.error("API response is not JSON", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="INVALID_RESPONSE",
                    message=f"Response is not valid JSON: {path}",
                    status_code=502,
                ),
            )
        except Exception as e:
            logger.exception("Unexpected API error", path=path)
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="INTERNAL_ERROR",
                    message=f"Internal error: {str(e)}",
                    status_code=500,
                ),
            )

    # =========================================================================
    # Product Endpoints
    # =========================================================================

    async def list_products(self, params: dict[str, Any]) -> APIResponse:
        """List products matching the given query.

        Args:
            params: Request parameters as built by the query translator
                (search, category, brand, minPrice, maxPrice, page, limit).

        Returns:
            APIResponse with ``{products, pagination}``.
        """
        return await self._request(
            method="GET",
            path="/products",
            params=params,
        )

    async def get_product(self, product_id: str) -> APIResponse:
        """Get a product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            APIResponse with product data.
        """
        return await self._request(
            method="GET",
            path=f"/products/{product_id}",
        )

    # =========================================================================
    # Lookup Endpoints
    # =========================================================================

    async def list_categories(self, limit: int = 100, page: int = 1) -> APIResponse:
        """List categories for the category dropdown.

        Args:
            limit: Items per page.
            page: Page number.

        Returns:
            APIResponse with ``{categories, pagination}``.
        """
        return await self._request(
            method="GET",
            path="/categories",
            params={"page": page, "limit": limit},
        )

    async def list_brands(self, limit: int = 100, page: int = 1) -> APIResponse:
        """List brands for the brand dropdown.

        Args:
            limit: Items per page.
            page: Page number.

        Returns:
            APIResponse with ``{brands, pagination}``.
        """
        return await self._request(
            method="GET",
            path="/brands",
            params={"page": page, "limit": limit},
        )
