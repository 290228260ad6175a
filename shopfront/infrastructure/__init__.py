"""Infrastructure layer - configuration, logging and the listing API client."""

from shopfront.infrastructure.api_client import APIError, APIResponse, CatalogAPIClient
from shopfront.infrastructure.config import Settings, settings
from shopfront.infrastructure.logging import configure_logging

__all__ = [
    "APIError",
    "APIResponse",
    "CatalogAPIClient",
    "Settings",
    "configure_logging",
    "settings",
]
