"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository``.

Update and delete follow an existence-check-then-mutate protocol: the
read-only ``exists`` predicate runs first and a missing product
short-circuits with ``ProductNotFound`` before any mutation is
attempted.  The check and the write are separate store calls; a product
removed in between makes the write a logged no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.dtos import (
    DeleteProductCommand,
    InsertProductCommand,
    UpdateProductCommand,
)
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
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

    def create_product(
        self, dto: CreateProductDTO, changed_by: Optional[str] = None
    ) -> Product:
        """Insert a product and return it with its store-assigned id."""
        log = logger.bind(changed_by=changed_by)

        product_id = self._repo.insert(
            InsertProductCommand.from_dto(dto, created_by=changed_by)
        )
        product = self._repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(f"Product {product_id} not found after insert.")

        log.info("product.created", product_id=product_id)
        return product

    def update_product(
        self, id: int, dto: UpdateProductDTO, changed_by: Optional[str] = None
    ) -> None:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: if the product does not exist; nothing is
                written in that case.
        """
        if not self._repo.exists(id):
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=id, changed_by=changed_by)
        rows = self._repo.update(
            UpdateProductCommand(id=id, changes=dto.changes(), updated_by=changed_by)
        )
        log.info("product.update_applied", rows_affected=rows)

    def delete_product(self, id: int, changed_by: Optional[str] = None) -> None:
        """Delete an existing product.

        Raises:
            ProductNotFound: if the product does not exist; nothing is
                written in that case.
        """
        if not self._repo.exists(id):
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=id, changed_by=changed_by)
        rows = self._repo.delete(DeleteProductCommand(id=id, deleted_by=changed_by))
        log.info("product.delete_applied", rows_affected=rows)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, in store order."""
        return self._repo.list_all()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return product
