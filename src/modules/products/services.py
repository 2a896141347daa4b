"""Product service layer (Use Cases).

Orchestrates the product lifecycle, delegating persistence to the
injected ``IProductRepository``.  Per product the lifecycle is::

    NonExistent -> Active(is_updated=False) -> Active(is_updated=True) -> Removed

Rules enforced here:
- Names are unique among existing products (409 on collision).
- A product may be updated exactly once (405 afterwards), even by an
  empty patch.
- A missing product is "not found" for read, update and delete alike;
  ``get_product`` is the single existence check every command goes
  through.

Checks always run before any write, so a rejected command leaves the
store untouched.  Exceptions propagate unchanged to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.dtos import UpdateProductDTO
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductAlreadyUpdated,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing name uniqueness.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(f"Product name '{dto.name}' already registered.")

        product = Product(
            name=dto.name,
            price=dto.price,
            description=dto.description,
            is_updated=False,
        )
        product = self._repo.insert(product)
        log.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: Optional[UpdateProductDTO] = None) -> Product:
        """Apply the product's one allowed partial update.

        Only fields present in ``dto`` change; ``dto=None`` is an empty
        patch.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyUpdated: if the update was already consumed.
            ProductAlreadyExists: if another product holds the new name.
        """
        product = self.get_product(id, lock=True)
        log = logger.bind(product_id=product.id)

        if product.is_updated:
            log.warning("product.update_rejected", reason="already_updated")
            raise ProductAlreadyUpdated(f"Product {id} has already been updated.")

        changes = (dto or UpdateProductDTO()).changes()

        new_name = changes.get("name")
        if new_name is not None and new_name != product.name:
            holder = self._repo.get_by_name(new_name)
            if holder is not None and holder.id != product.id:
                log.warning("product.duplicate_name", name=new_name)
                raise ProductAlreadyExists(
                    f"Product name '{new_name}' already registered."
                )

        for field, value in changes.items():
            setattr(product, field, value)
        product.is_updated = True

        product = self._repo.update(product)
        log.info("product.updated", fields=sorted(changes))
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        self._repo.delete(product.id)
        logger.info("product.deleted", product_id=product.id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product in insertion order."""
        return self._repo.list()

    def get_product(self, id: int, lock: bool = False) -> Product:
        """Retrieve a single product by ID.

        ``lock=True`` takes a row lock for the rest of the enclosing
        transaction.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_for_update(id) if lock else self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
