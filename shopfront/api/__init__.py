"""API layer module.

Contains the FastAPI routers and wire schemas of the listing API.
"""

from shopfront.api.catalog import router as catalog_router
from shopfront.api.health import router as health_router

__all__ = [
    "catalog_router",
    "health_router",
]
