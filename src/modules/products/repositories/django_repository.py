"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
and mutations return a row count instead of raising HTTP-level
exceptions; the Service Layer decides how to translate a missing
entity into an API response.

Soft-deleted products are invisible to every operation here.  Each
mutation runs in its own transaction together with the audit row
written by ``modules.products.signals``.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.dtos import (
    DeleteProductCommand,
    InsertProductCommand,
    UpdateProductCommand,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list_all(self) -> List[Product]:
        return list(Product.objects.alive().order_by("id"))

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a live product by primary key.

        Returns ``None`` for non-existent, soft-deleted or invalid IDs.
        """
        try:
            return Product.objects.alive().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def exists(self, id: int) -> bool:
        try:
            return Product.objects.alive().filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    @transaction.atomic
    def insert(self, command: InsertProductCommand) -> int:
        product = Product(
            name=command.name,
            description=command.description,
            price=command.price,
            stock_quantity=command.stock_quantity,
        )
        product._changed_by = command.created_by
        product.save()
        logger.info(
            "product.inserted",
            product_id=product.id,
            changed_by=command.created_by,
        )
        return product.id

    @transaction.atomic
    def update(self, command: UpdateProductCommand) -> int:
        product = (
            Product.objects.alive().select_for_update().filter(id=command.id).first()
        )
        if product is None:
            logger.warning("product.update_missed", product_id=command.id)
            return 0

        if not command.changes:
            logger.info("product.update_skipped", product_id=command.id)
            return 1

        for field, value in command.changes.items():
            setattr(product, field, value)
        product._changed_by = command.updated_by
        product.save()
        logger.info(
            "product.updated",
            product_id=command.id,
            fields=sorted(command.changes),
            changed_by=command.updated_by,
        )
        return 1

    @transaction.atomic
    def delete(self, command: DeleteProductCommand) -> int:
        """Soft-delete a product by ID."""
        product = (
            Product.objects.alive().select_for_update().filter(id=command.id).first()
        )
        if product is None:
            logger.warning("product.delete_missed", product_id=command.id)
            return 0

        product._changed_by = command.deleted_by
        count, _ = product.delete()
        logger.info(
            "product.soft_deleted",
            product_id=command.id,
            changed_by=command.deleted_by,
        )
        return count
