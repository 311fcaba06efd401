"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient

from api.index import app
from storefront.cart import CartEngine, CartMode
from storefront.routers.deps import get_cart_engine, get_notification_collector


@pytest.fixture
def client(engine, collector):
    """Test client bound to a fresh empty-mode engine"""
    app.dependency_overrides[get_cart_engine] = lambda: engine
    app.dependency_overrides[get_notification_collector] = lambda: collector
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def prepopulated_client(prepopulated_engine, collector):
    app.dependency_overrides[get_cart_engine] = lambda: prepopulated_engine
    app.dependency_overrides[get_notification_collector] = lambda: collector
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_catalog(client):
    response = client.get("/api/catalog")

    assert response.status_code == 200
    data = response.json()
    assert [entry["id"] for entry in data] == [1, 2]
    assert data[0]["unit_price"] == "99.99"
    assert data[0]["unit_price_display"] == "$99.99"


def test_get_empty_cart(client):
    response = client.get("/api/cart")

    assert response.status_code == 200
    data = response.json()
    assert data["is_empty"] is True
    assert data["total"] == "0.00"
    assert data["notifications"] == []


def test_add_to_cart(client):
    response = client.post("/api/cart/add", json={"catalog_id": 1})

    assert response.status_code == 200
    data = response.json()
    assert data["result"]["status"] == "success"
    assert data["cart"]["lines"][0]["name"] == "Premium Widget"
    assert data["cart"]["lines"][0]["quantity"] == 0
    assert data["cart"]["notifications"][0]["description"] == "Premium Widget added to cart"


def test_add_duplicate(client):
    client.post("/api/cart/add", json={"catalog_id": 1})
    response = client.post("/api/cart/add", json={"catalog_id": 1})

    data = response.json()
    assert data["result"]["status"] == "duplicate"
    assert len(data["cart"]["lines"]) == 1
    assert data["cart"]["notifications"][0]["variant"] == "destructive"


def test_add_unknown(client):
    response = client.post("/api/cart/add", json={"catalog_id": 99})

    data = response.json()
    assert data["result"]["status"] == "notFound"
    assert data["cart"]["lines"] == []
    assert data["cart"]["notifications"] == []


def test_add_invalid_body(client):
    response = client.post("/api/cart/add", json={"catalog_id": "abc"})

    assert response.status_code == 422


def test_update_quantity(client):
    client.post("/api/cart/add", json={"catalog_id": 1})

    response = client.patch("/api/cart/item", json={"id": 1, "quantity": 3})

    data = response.json()
    assert data["lines"][0]["quantity"] == 3
    assert data["total"] == "299.97"


def test_negative_quantity_ignored(client):
    client.post("/api/cart/add", json={"catalog_id": 1})
    client.patch("/api/cart/item", json={"id": 1, "quantity": 2})

    response = client.patch("/api/cart/item", json={"id": 1, "quantity": -1})

    assert response.status_code == 200
    assert response.json()["lines"][0]["quantity"] == 2


def test_increment_decrement(prepopulated_client):
    prepopulated_client.post("/api/cart/item/3/increment")
    response = prepopulated_client.post("/api/cart/item/3/increment")
    assert response.json()["lines"][2]["quantity"] == 2

    response = prepopulated_client.post("/api/cart/item/3/decrement")
    data = response.json()
    assert data["lines"][2]["quantity"] == 1
    assert data["total"] == "199.99"


def test_checkout_empty(client):
    response = client.post("/api/cart/checkout")

    data = response.json()
    assert response.status_code == 200
    assert data["result"]["status"] == "validationFailure"
    assert data["result"]["message"] == "Please select at least one product"
    assert data["cart"]["notifications"][0]["title"] == "Error"


def test_checkout_success(client):
    client.post("/api/cart/add", json={"catalog_id": 1})
    client.post("/api/cart/add", json={"catalog_id": 2})
    client.patch("/api/cart/item", json={"id": 1, "quantity": 2})
    client.patch("/api/cart/item", json={"id": 2, "quantity": 1})

    response = client.post("/api/cart/checkout")

    data = response.json()
    assert data["result"]["status"] == "success"
    assert data["result"]["total"] == "249.97"
    assert "249.97" in data["result"]["message"]
    assert data["cart"]["notifications"][0]["title"] == "Order Placed!"


def test_reset(prepopulated_client):
    prepopulated_client.patch("/api/cart/item", json={"id": 1, "quantity": 4})

    response = prepopulated_client.post("/api/cart/reset")

    data = response.json()
    assert data["mode"] == CartMode.PREPOPULATED.value
    assert data["total_items"] == 0
    assert len(data["lines"]) == 3


def test_default_engine_singleton(monkeypatch):
    """Without overrides the app builds its engine from settings"""
    import storefront.routers.deps as deps

    monkeypatch.setattr(deps, "_cart_engine", None)
    monkeypatch.setattr(deps, "_notification_collector", None)
    monkeypatch.setenv("CART_MODE", "prepopulated")

    engine = deps.get_cart_engine()

    assert isinstance(engine, CartEngine)
    assert engine is deps.get_cart_engine()
    assert len(engine.cart) == 3
