"""Product model.

Business rules implemented:
- RN-PRO-001: Price cannot be negative (enforced by a check constraint).
- RN-PRO-002: Stock quantity cannot be negative (unsigned column).
- RN-PRO-003: Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
- RN-PRO-004: Every insert / update / delete is recorded in the audit
  trail (see ``modules.products.signals``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel


class Product(SoftDeleteModel):
    """Product aggregate root.

    ``_changed_by`` is a transient attribute (never persisted on this
    table) carrying the actor of the current mutation to the audit
    signal receivers.
    """

    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    price = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    stock_quantity = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Audit support
    # ------------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Return the audited field values as a JSON-friendly dict."""
        price = self.price
        if price is not None:
            price = str(Decimal(price).quantize(Decimal("0.01")))
        return {
            "name": self.name,
            "description": self.description,
            "price": price,
            "stock_quantity": self.stock_quantity,
        }

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
