"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and renders
the camelCase wire format.  Input is validated by the Pydantic DTOs in
``dtos.py`` before it reaches the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    price = serializers.DecimalField(
        max_digits=18, decimal_places=2, coerce_to_string=False, read_only=True
    )
    stockQuantity = serializers.IntegerField(source="stock_quantity", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stockQuantity",
        ]
        read_only_fields = fields
