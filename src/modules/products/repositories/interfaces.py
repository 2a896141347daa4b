"""Product repository interface.

Extends ``IRepository[Product]`` with the name look-up required by the
uniqueness rule and a locking read used by the one-time update.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    Implementations are the authoritative guard for name uniqueness:
    ``insert`` and ``update`` raise ``ProductAlreadyExists`` when another
    record already holds the name, even if the caller checked first.
    """

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by exact (case-sensitive) name."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if the
        product does not exist.
        """
