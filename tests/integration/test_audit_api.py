"""Integration tests for the audit trail endpoint (/products/audit)."""

from __future__ import annotations

import json
from datetime import datetime

import pytest
from freezegun import freeze_time

pytestmark = pytest.mark.integration


def _create(api_client, actor=None, **payload):
    url = "/products" if actor is None else f"/products?changedBy={actor}"
    response = api_client.post(url, payload, format="json")
    assert response.status_code == 201
    return response.json()["id"]


class TestAuditList:
    def test_empty_trail(self, api_client):
        response = api_client.get("/products/audit")
        assert response.status_code == 200
        assert response.json() == []

    def test_audit_route_is_not_a_product_id(self, api_client, sample_product):
        response = api_client.get("/products/audit")
        assert response.status_code == 200
        assert isinstance(response.json(), list)

    def test_entry_wire_format(self, api_client):
        product_id = _create(
            api_client, actor="alice", name="Widget", price=9.99, stockQuantity=10
        )
        entry = api_client.get("/products/audit").json()[0]
        assert set(entry) == {
            "id",
            "tableName",
            "action",
            "recordId",
            "oldValues",
            "newValues",
            "changedBy",
            "changedAt",
        }
        assert entry["tableName"] == "products"
        assert entry["action"] == "INSERT"
        assert entry["recordId"] == product_id
        assert entry["oldValues"] is None
        assert json.loads(entry["newValues"]) == {
            "name": "Widget",
            "description": None,
            "price": "9.99",
            "stock_quantity": 10,
        }
        assert entry["changedBy"] == "alice"

    def test_full_lifecycle_is_recorded(self, api_client):
        product_id = _create(api_client, actor="alice", name="Widget", price=1)
        api_client.put(
            f"/products/{product_id}?changedBy=bob", {"price": 2}, format="json"
        )
        api_client.delete(f"/products/{product_id}")

        entries = api_client.get("/products/audit").json()
        assert [e["action"] for e in entries] == ["DELETE", "UPDATE", "INSERT"]
        assert [e["changedBy"] for e in entries] == [None, "bob", "alice"]

        delete, update, _ = entries
        assert json.loads(update["oldValues"])["price"] == "1.00"
        assert json.loads(update["newValues"])["price"] == "2.00"
        assert delete["newValues"] is None
        assert json.loads(delete["oldValues"])["price"] == "2.00"

    def test_not_found_mutations_are_not_recorded(self, api_client):
        api_client.put("/products/424242", {"name": "Ghost"}, format="json")
        api_client.delete("/products/424242")
        assert api_client.get("/products/audit").json() == []

    def test_ordered_most_recent_first(self, api_client):
        with freeze_time("2024-01-01 10:00:00"):
            first = _create(api_client, name="First", price=1)
        with freeze_time("2024-01-03 10:00:00"):
            third = _create(api_client, name="Third", price=1)
        with freeze_time("2024-01-02 10:00:00"):
            second = _create(api_client, name="Second", price=1)

        entries = api_client.get("/products/audit").json()
        assert [e["recordId"] for e in entries] == [third, second, first]

        stamps = [datetime.fromisoformat(e["changedAt"]) for e in entries]
        assert stamps == sorted(stamps, reverse=True)
