"""Unit tests for ProductService.

Covers:
- create_product: insert + read-back, actor forwarding.
- update_product / delete_product: existence check before mutation,
  no mutation when absent.
- get_product / list_products: delegation to repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock, call

import pytest

from modules.products.dtos import (
    CreateProductDTO,
    DeleteProductCommand,
    InsertProductCommand,
    UpdateProductCommand,
    UpdateProductDTO,
)
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {
        "id": 1,
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock_quantity": 10,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_inserts_and_returns_stored_product(self, service, mock_repo):
        stored = _product(id=42)
        mock_repo.insert.return_value = 42
        mock_repo.get_by_id.return_value = stored

        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"))
        product = service.create_product(dto)

        assert product is stored
        mock_repo.get_by_id.assert_called_once_with(42)

    def test_builds_insert_command(self, service, mock_repo):
        mock_repo.insert.return_value = 1
        mock_repo.get_by_id.return_value = _product()

        dto = CreateProductDTO(
            name="Gadget",
            price=Decimal("29.99"),
            description="A fine gadget",
            stock_quantity=50,
        )
        service.create_product(dto, changed_by="alice")

        mock_repo.insert.assert_called_once_with(
            InsertProductCommand(
                name="Gadget",
                description="A fine gadget",
                price=Decimal("29.99"),
                stock_quantity=50,
                created_by="alice",
            )
        )

    def test_no_actor_means_no_attribution(self, service, mock_repo):
        mock_repo.insert.return_value = 1
        mock_repo.get_by_id.return_value = _product()

        service.create_product(CreateProductDTO(name="W", price=Decimal("1")))

        command = mock_repo.insert.call_args.args[0]
        assert command.created_by is None


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_checks_existence_then_updates(self, service, mock_repo):
        mock_repo.exists.return_value = True
        mock_repo.update.return_value = 1

        dto = UpdateProductDTO(stock_quantity=5)
        service.update_product(7, dto, changed_by="bob")

        assert mock_repo.method_calls[:2] == [
            call.exists(7),
            call.update(
                UpdateProductCommand(
                    id=7, changes={"stock_quantity": 5}, updated_by="bob"
                )
            ),
        ]

    def test_not_found_raises_without_mutation(self, service, mock_repo):
        mock_repo.exists.return_value = False

        with pytest.raises(ProductNotFound):
            service.update_product(999, UpdateProductDTO(name="Ghost"))

        mock_repo.update.assert_not_called()

    def test_row_vanished_after_check_is_not_an_error(self, service, mock_repo):
        mock_repo.exists.return_value = True
        mock_repo.update.return_value = 0

        service.update_product(7, UpdateProductDTO(name="Late"))

        mock_repo.update.assert_called_once()

    def test_returns_nothing(self, service, mock_repo):
        mock_repo.exists.return_value = True
        assert service.update_product(7, UpdateProductDTO(name="X")) is None


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_checks_existence_then_deletes(self, service, mock_repo):
        mock_repo.exists.return_value = True
        mock_repo.delete.return_value = 1

        service.delete_product(7, changed_by="carol")

        assert mock_repo.method_calls[:2] == [
            call.exists(7),
            call.delete(DeleteProductCommand(id=7, deleted_by="carol")),
        ]

    def test_not_found_raises_without_mutation(self, service, mock_repo):
        mock_repo.exists.return_value = False

        with pytest.raises(ProductNotFound):
            service.delete_product(999)

        mock_repo.delete.assert_not_called()


# ===========================================================================
# get_product
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _product(id=3)
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(3) is existing
        mock_repo.get_by_id.assert_called_once_with(3)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.get_product(999)


# ===========================================================================
# list_products
# ===========================================================================


class TestListProducts:
    def test_delegates_to_repo(self, service, mock_repo):
        products = [_product(id=1), _product(id=2)]
        mock_repo.list_all.return_value = products

        assert service.list_products() == products
        mock_repo.list_all.assert_called_once_with()
