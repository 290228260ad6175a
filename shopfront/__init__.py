"""Shopfront catalog.

Product catalog browsing engine: filter state reconciliation, query
translation, pagination and an ordered fetch cycle, plus the listing API
it talks to.
"""

__version__ = "0.1.0"
