"""Product repositories package.

``get_product_repository`` is the composition root for the Product store:
it reads ``settings.PRODUCTS_REPOSITORY`` and returns the ORM-backed store
(``"django"``) or the process-wide in-memory store (``"memory"``).
"""

from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import ProductMemoryRepository

__all__ = [
    "IProductRepository",
    "ProductDjangoRepository",
    "ProductMemoryRepository",
    "get_product_repository",
]


@lru_cache(maxsize=None)
def _memory_repository() -> ProductMemoryRepository:
    return ProductMemoryRepository()


def get_product_repository() -> IProductRepository:
    backend = getattr(settings, "PRODUCTS_REPOSITORY", "django")
    if backend == "django":
        return ProductDjangoRepository()
    if backend == "memory":
        return _memory_repository()
    raise ImproperlyConfigured(
        f"Unknown PRODUCTS_REPOSITORY '{backend}' (expected 'django' or 'memory')."
    )
