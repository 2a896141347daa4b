"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead of
raising, and the Service Layer decides how to translate a missing entity
into an API response.  Writes translate a violated UNIQUE index on
``name`` into ``ProductAlreadyExists``.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import IntegrityError, transaction

from modules.products.constants import UPDATABLE_FIELDS
from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (TypeError, ValueError, OverflowError):
            return None

    def get_for_update(self, id: int) -> Optional[Product]:
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (TypeError, ValueError, OverflowError):
            return None

    def get_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name=name).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    def insert(self, entity: Product) -> Product:
        """Persist a new product; the database assigns its ``id``."""
        self._write(entity, force_insert=True)
        logger.info("product.inserted", product_id=entity.id, name=entity.name)
        return entity

    def update(self, entity: Product) -> Product:
        """Persist the mutable columns of an existing product."""
        self._write(entity, update_fields=[*UPDATABLE_FIELDS, "is_updated"])
        logger.info("product.saved", product_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        deleted, _ = Product.objects.filter(id=id).delete()
        if deleted:
            logger.info("product.removed", product_id=id)
        return bool(deleted)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(self, entity: Product, **save_kwargs) -> None:
        # The savepoint keeps the outer transaction usable after a
        # constraint violation, so the name can be re-checked below.
        try:
            with transaction.atomic():
                entity.save(**save_kwargs)
        except IntegrityError as exc:
            holder = self.get_by_name(entity.name)
            if holder is not None and holder.id != entity.id:
                logger.warning("product.unique_name_violation", name=entity.name)
                raise ProductAlreadyExists(
                    f"Product name '{entity.name}' already registered."
                ) from exc
            raise
