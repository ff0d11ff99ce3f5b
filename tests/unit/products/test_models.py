"""Unit tests for the Product model."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductModel:
    def test_id_is_positive_integer(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert isinstance(product.id, int)
        assert product.id > 0

    def test_defaults(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"))
        product.refresh_from_db()
        assert product.description is None
        assert product.stock_quantity == 0
        assert product.deleted_at is None

    def test_default_ordering_is_by_id(self):
        b = Product.objects.create(name="B", price=Decimal("1.00"))
        a = Product.objects.create(name="A", price=Decimal("1.00"))
        assert list(Product.objects.all()) == [b, a]

    def test_str(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert str(product) == f"#{product.id} - Widget"

    def test_database_rejects_negative_price(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Widget", price=Decimal("-1.00"))


class TestSnapshot:
    def test_snapshot_renders_price_with_two_places(self):
        product = Product(
            name="Widget", description=None, price=Decimal("5"), stock_quantity=2
        )
        assert product.snapshot() == {
            "name": "Widget",
            "description": None,
            "price": "5.00",
            "stock_quantity": 2,
        }
