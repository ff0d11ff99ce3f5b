"""Product repository interface.

Extends ``IRepository[Product]`` with one method per named store
operation: *get by id*, *insert*, *update*, *delete* and the *exists*
predicate.  Mutating operations take the typed command objects from
``modules.products.dtos``; the store is responsible for recording the
audit trail of every mutation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import (
        DeleteProductCommand,
        InsertProductCommand,
        UpdateProductCommand,
    )
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list_all(self) -> List[Product]:
        """Return every live product, ordered by id."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a live product, or ``None`` when absent."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return whether a live product with this id exists (read-only)."""

    @abstractmethod
    def insert(self, command: InsertProductCommand) -> int:
        """Create a product and return its store-assigned id."""

    @abstractmethod
    def update(self, command: UpdateProductCommand) -> int:
        """Apply the supplied changes; return the number of rows affected."""

    @abstractmethod
    def delete(self, command: DeleteProductCommand) -> int:
        """Remove a product; return the number of rows affected."""
