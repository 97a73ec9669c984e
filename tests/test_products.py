# This project was developed with assistance from AI tools.
"""Tests for product CRUD endpoints."""

import pytest

WIDGET = {"sku": "SKU-001", "name": "Widget", "description": "A widget", "price": 1000}


def test_create_product_returns_201_with_sku(client):
    resp = client.post("/api/products", json=WIDGET)
    assert resp.status_code == 201
    body = resp.json()
    assert body["sku"] == "SKU-001"
    assert body["price"] == 1000
    assert body["id"] == 1


def test_create_then_get_returns_matching_fields(client):
    client.post("/api/products", json=WIDGET)

    resp = client.get("/api/products/SKU-001")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Widget"
    assert body["description"] == "A widget"
    assert body["price"] == 1000


def test_create_without_description(client):
    resp = client.post("/api/products", json={"sku": "SKU-002", "name": "Bare", "price": 5})
    assert resp.status_code == 201
    assert resp.json()["description"] is None


@pytest.mark.parametrize("missing", ["sku", "name", "price"])
def test_create_missing_required_field_returns_400(client, store, missing):
    payload = {k: v for k, v in WIDGET.items() if k != missing}

    resp = client.post("/api/products", json=payload)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "SKU, name and price are required."
    assert store.writes == 0


def test_create_with_zero_price_counts_as_missing(client, store):
    resp = client.post("/api/products", json={**WIDGET, "price": 0})
    assert resp.status_code == 400
    assert store.writes == 0


def test_create_with_unparseable_price_returns_400(client, store):
    resp = client.post("/api/products", json={**WIDGET, "price": "lots"})
    assert resp.status_code == 400
    assert store.writes == 0


def test_get_unknown_sku_returns_404(client):
    resp = client.get("/api/products/NOPE")
    assert resp.status_code == 404
    body = resp.json()
    assert body["status"] == 404
    assert body["title"] == "Not Found"
    assert body["detail"] == "Product not found."


def test_list_products(client):
    client.post("/api/products", json=WIDGET)
    client.post("/api/products", json={"sku": "SKU-002", "name": "Gadget", "price": 20})

    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert [p["sku"] for p in resp.json()] == ["SKU-001", "SKU-002"]


def test_list_products_empty(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.json() == []


def test_update_changes_fields_on_next_fetch(client):
    client.post("/api/products", json=WIDGET)

    resp = client.put("/api/products/SKU-001", json={"name": "Widget v2", "price": 1200})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Widget v2"

    fetched = client.get("/api/products/SKU-001").json()
    assert fetched["name"] == "Widget v2"
    assert fetched["price"] == 1200
    # description not sent, so left as is
    assert fetched["description"] == "A widget"


def test_update_missing_price_returns_400(client, store):
    client.post("/api/products", json=WIDGET)
    writes_before = store.writes

    resp = client.put("/api/products/SKU-001", json={"name": "Widget v2"})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Name and price are required."
    assert store.writes == writes_before


def test_update_unknown_sku_is_empty_update(client):
    resp = client.put("/api/products/NOPE", json={"name": "Ghost", "price": 1})
    assert resp.status_code == 200
    assert resp.json() is None


def test_delete_then_get_returns_404(client):
    client.post("/api/products", json=WIDGET)

    resp = client.delete("/api/products/SKU-001")
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get("/api/products/SKU-001").status_code == 404


def test_delete_unknown_sku_returns_204(client):
    assert client.delete("/api/products/NOPE").status_code == 204


class TestStoreFailures:
    """Store errors surface as 500 with a per-endpoint message."""

    def test_list(self, broken_client):
        resp = broken_client.get("/api/products")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error fetching products"

    def test_get(self, broken_client):
        resp = broken_client.get("/api/products/SKU-001")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error fetching product"

    def test_create(self, broken_client):
        resp = broken_client.post("/api/products", json=WIDGET)
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error creating product"

    def test_update(self, broken_client):
        resp = broken_client.put("/api/products/SKU-001", json={"name": "x", "price": 1})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error updating product"

    def test_delete(self, broken_client):
        resp = broken_client.delete("/api/products/SKU-001")
        assert resp.status_code == 500
        assert resp.json()["title"] == "Internal Server Error"


def test_get_passes_store_managed_columns_through(store, client):
    store.tables["products"].append(
        {"id": 42, "created_at": "2026-01-15T10:00:00+00:00", **WIDGET}
    )

    body = client.get("/api/products/SKU-001").json()

    assert body["id"] == 42
    assert body["created_at"] == "2026-01-15T10:00:00+00:00"
