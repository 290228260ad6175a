"""Seeded in-memory catalog served by the listing API."""

from shopfront.catalog.store import CatalogStore, get_catalog_store

__all__ = [
    "CatalogStore",
    "get_catalog_store",
]
