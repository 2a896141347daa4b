"""Product DRF serializer for API output.

The serializer operates at the Interface layer (API Views) and only
shapes responses: input validation lives in the Pydantic DTOs from
``dtos.py``.  The internal ``is_updated`` flag is never exposed.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only representation of the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "description"]
        read_only_fields = fields
