"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """Another product already holds the requested name (409)."""


class ProductNotFound(Exception):
    """The requested product was never created or has been deleted (404)."""


class ProductAlreadyUpdated(Exception):
    """The product's single allowed update has already been consumed (405)."""
