"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by ``id`` (insertion ordered) behind a
lock.  Ids come from a counter owned by the repository: they start at 1,
increase by one per insert and are never reused after deletion.

Stored rows are snapshots: callers always receive detached copies, so
mutating a returned ``Product`` has no effect until ``update`` is called.
``update`` rejects rows whose one-time update is already consumed, which
stands in for the row lock the ORM store takes in ``get_for_update``.
"""

from __future__ import annotations

import itertools
import threading
from typing import Dict, List, Optional

import structlog
from django.utils import timezone

from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductAlreadyUpdated,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _snapshot(product: Product) -> Product:
    return Product(
        **{
            field.attname: getattr(product, field.attname)
            for field in Product._meta.concrete_fields
        }
    )


class ProductMemoryRepository(IProductRepository):
    """Process-local Product repository."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._sequence = itertools.count(1)
        self._rows: Dict[int, Product] = {}

    def get_by_id(self, id: int) -> Optional[Product]:
        with self._lock:
            row = self._rows.get(id)
            return _snapshot(row) if row is not None else None

    def get_for_update(self, id: int) -> Optional[Product]:
        return self.get_by_id(id)

    def get_by_name(self, name: str) -> Optional[Product]:
        with self._lock:
            for row in self._rows.values():
                if row.name == name:
                    return _snapshot(row)
        return None

    def list(self) -> List[Product]:
        with self._lock:
            return [_snapshot(row) for row in self._rows.values()]

    def insert(self, entity: Product) -> Product:
        with self._lock:
            self._ensure_name_free(entity.name, owner_id=None)
            now = timezone.now()
            entity.id = next(self._sequence)
            entity.created_at = now
            entity.updated_at = now
            self._rows[entity.id] = _snapshot(entity)
        logger.info("product.inserted", product_id=entity.id, name=entity.name)
        return entity

    def update(self, entity: Product) -> Product:
        with self._lock:
            stored = self._rows.get(entity.id)
            if stored is None:
                raise ProductNotFound(f"Product {entity.id} not found.")
            # A stale snapshot cannot consume the one-time update twice.
            if stored.is_updated:
                raise ProductAlreadyUpdated(
                    f"Product {entity.id} has already been updated."
                )
            self._ensure_name_free(entity.name, owner_id=entity.id)
            entity.updated_at = timezone.now()
            self._rows[entity.id] = _snapshot(entity)
        logger.info("product.saved", product_id=entity.id, name=entity.name)
        return entity

    def delete(self, id: int) -> bool:
        with self._lock:
            removed = self._rows.pop(id, None)
        if removed is None:
            return False
        logger.info("product.removed", product_id=id)
        return True

    def _ensure_name_free(self, name: str, owner_id: Optional[int]) -> None:
        for row in self._rows.values():
            if row.name == name and row.id != owner_id:
                logger.warning("product.unique_name_violation", name=name)
                raise ProductAlreadyExists(
                    f"Product name '{name}' already registered."
                )
