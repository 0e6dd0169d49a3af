"""Integration tests for Cart API endpoints via TestClient."""

import pytest
from commerce.gateway.port import UserError
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.routes import cart_router, order_router
from ordering.cart.cart import CartStatus, ShoppingCart
from ordering.checkout.submission import GENERIC_FAILURE_MESSAGE
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers

VARIANT_1 = "gid://shopify/ProductVariant/1"
VARIANT_2 = "gid://shopify/ProductVariant/2"


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    return TestClient(app)


def _create_cart(client, customer_id=None):
    """Helper: POST /carts and return the cart_id."""
    response = client.post("/carts", json={"customer_id": customer_id})
    assert response.status_code == 201
    return response.json()["cart_id"]


def _add_line(client, cart_id, variant_id=VARIANT_1, unit_price="10.00"):
    """Helper: POST /carts/{cart_id}/lines."""
    response = client.post(
        f"/carts/{cart_id}/lines",
        json={
            "product_id": "gid://shopify/Product/1",
            "product_title": "Classic Tee",
            "variant_id": variant_id,
            "variant_title": "Black / M",
            "unit_price": unit_price,
        },
    )
    assert response.status_code == 200
    return response


class TestCreateCartEndpoint:
    def test_create_cart(self, client):
        cart_id = _create_cart(client, customer_id="gid://shopify/Customer/7")

        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.customer_id == "gid://shopify/Customer/7"
        assert cart.status == CartStatus.ACTIVE.value

    def test_get_empty_cart(self, client):
        cart_id = _create_cart(client)
        response = client.get(f"/carts/{cart_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["lines"] == []
        assert body["totals"] == {"subtotal": "0.00", "tax": "0.00", "total": "0.00"}

    def test_get_unknown_cart_is_404(self, client):
        response = client.get("/carts/does-not-exist")
        assert response.status_code == 404


class TestCartLineEndpoints:
    def test_add_line_returns_cart_with_totals(self, client):
        cart_id = _create_cart(client)
        _add_line(client, cart_id)
        body = _add_line(client, cart_id).json()

        assert len(body["lines"]) == 1
        assert body["lines"][0]["quantity"] == 2
        assert body["lines"][0]["line_total"] == "20.00"
        assert body["totals"] == {"subtotal": "20.00", "tax": "3.60", "total": "23.60"}

    def test_add_line_rejects_malformed_price(self, client):
        cart_id = _create_cart(client)
        response = client.post(
            f"/carts/{cart_id}/lines",
            json={
                "product_id": "gid://shopify/Product/1",
                "product_title": "Classic Tee",
                "variant_id": VARIANT_1,
                "unit_price": "ten",
            },
        )
        assert response.status_code == 422

    def test_set_quantity(self, client):
        cart_id = _create_cart(client)
        _add_line(client, cart_id)
        response = client.put(
            f"/carts/{cart_id}/lines/quantity",
            params={"variant_id": VARIANT_1},
            json={"quantity": "5"},
        )
        assert response.status_code == 200
        assert response.json()["lines"][0]["quantity"] == 5

    def test_set_quantity_clamps_invalid_input(self, client):
        cart_id = _create_cart(client)
        _add_line(client, cart_id)
        response = client.put(
            f"/carts/{cart_id}/lines/quantity",
            params={"variant_id": VARIANT_1},
            json={"quantity": "-3"},
        )
        assert response.json()["lines"][0]["quantity"] == 1

    def test_set_quantity_accepts_long_input(self, client):
        cart_id = _create_cart(client)
        _add_line(client, cart_id)
        _add_line(client, cart_id)

        response = client.put(
            f"/carts/{cart_id}/lines/quantity",
            params={"variant_id": VARIANT_1},
            json={"quantity": "many " * 60},
        )

        assert response.status_code == 200
        assert response.json()["lines"][0]["quantity"] == 1

    def test_remove_line(self, client):
        cart_id = _create_cart(client)
        _add_line(client, cart_id)
        _add_line(client, cart_id, variant_id=VARIANT_2, unit_price="2.50")

        response = client.delete(f"/carts/{cart_id}/lines", params={"variant_id": VARIANT_1})

        assert response.status_code == 200
        body = response.json()
        assert [line["variant_id"] for line in body["lines"]] == [VARIANT_2]
        assert body["totals"]["subtotal"] == "2.50"


class TestCartCustomerEndpoints:
    def test_assign_and_clear_customer(self, client):
        cart_id = _create_cart(client)

        response = client.put(f"/carts/{cart_id}/customer", json={"customer_id": "gid://shopify/Customer/3"})
        assert response.status_code == 200
        assert client.get(f"/carts/{cart_id}").json()["customer_id"] == "gid://shopify/Customer/3"

        response = client.delete(f"/carts/{cart_id}/customer")
        assert response.status_code == 200
        assert client.get(f"/carts/{cart_id}").json()["customer_id"] is None

    def test_discard_cart(self, client):
        cart_id = _create_cart(client)
        response = client.put(f"/carts/{cart_id}/discard")
        assert response.status_code == 200
        assert client.get(f"/carts/{cart_id}").json()["status"] == CartStatus.DISCARDED.value

    def test_discarded_cart_rejects_lines(self, client):
        cart_id = _create_cart(client)
        client.put(f"/carts/{cart_id}/discard")
        response = client.post(
            f"/carts/{cart_id}/lines",
            json={
                "product_id": "gid://shopify/Product/1",
                "product_title": "Classic Tee",
                "variant_id": VARIANT_1,
                "unit_price": "10.00",
            },
        )
        assert response.status_code == 400


class TestCheckoutEndpoint:
    def test_checkout_success(self, client, gateway):
        cart_id = _create_cart(client)
        _add_line(client, cart_id)

        response = client.post(f"/carts/{cart_id}/checkout", json={"tags": "rush", "notes": "Call first"})

        assert response.status_code == 201
        assert response.json() == {"success": True, "errors": [], "redirect_to": "/orders"}
        assert client.get(f"/carts/{cart_id}").json()["status"] == CartStatus.CONVERTED.value

    def test_checkout_empty_cart(self, client, gateway):
        cart_id = _create_cart(client)

        response = client.post(f"/carts/{cart_id}/checkout", json={})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["errors"][0]["field"] == "lineItems"
        assert gateway.calls == []

    def test_checkout_user_errors(self, client, gateway):
        gateway.configure(create_errors=[UserError(field="lineItems", message="Invalid variant")])
        cart_id = _create_cart(client)
        _add_line(client, cart_id)

        response = client.post(f"/carts/{cart_id}/checkout", json={})

        assert response.status_code == 422
        assert response.json()["errors"] == [{"field": "lineItems", "message": "Invalid variant"}]

    def test_checkout_transport_fault(self, client, gateway):
        gateway.configure(fail_transport=True)
        cart_id = _create_cart(client)
        _add_line(client, cart_id)

        response = client.post(f"/carts/{cart_id}/checkout", json={})

        assert response.status_code == 422
        assert response.json()["errors"] == [{"field": None, "message": GENERIC_FAILURE_MESSAGE}]
