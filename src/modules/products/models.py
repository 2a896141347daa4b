"""Product model with name uniqueness and a one-time update flag.

Business rules backed by the database:
- ``name`` is unique (UNIQUE INDEX), the authoritative guard against
  duplicate names under concurrent requests.
- ``price`` must be greater than zero (CHECK constraint).
- ``id`` comes from the database auto-increment primitive and is never
  reused, even after deletion.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel
from modules.products.constants import NAME_MAX_LENGTH


class Product(TimestampedModel):
    """Product record.

    ``is_updated`` is internal to the service layer and never serialized:
    it starts ``False`` and flips to ``True`` on the first successful update.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH, unique=True)
    price = models.PositiveBigIntegerField()
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    is_updated = models.BooleanField(default=False)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
