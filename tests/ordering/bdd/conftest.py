"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from commerce.gateway.port import Product, ProductVariant
from ordering.cart.cart import ShoppingCart
from ordering.cart.events import (
    CartConverted,
    CartCustomerAssigned,
    CartCustomerCleared,
    CartDiscarded,
    CartLineAdded,
    CartLineQuantityChanged,
    CartLineRemoved,
)
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup in Then steps
_CART_EVENT_CLASSES = {
    "CartLineAdded": CartLineAdded,
    "CartLineQuantityChanged": CartLineQuantityChanged,
    "CartLineRemoved": CartLineRemoved,
    "CartCustomerAssigned": CartCustomerAssigned,
    "CartCustomerCleared": CartCustomerCleared,
    "CartConverted": CartConverted,
    "CartDiscarded": CartDiscarded,
}


def picked(variant_id, price):
    """The product and variant as the product picker hands them over."""
    product = Product(id="gid://shopify/Product/1", title="Classic Tee", handle="classic-tee")
    return product, ProductVariant(id=variant_id, title=f"Variant {variant_id}", price=price)


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors (used by cart tests)."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps: Shopping Cart
# ---------------------------------------------------------------------------
@given("an active cart", target_fixture="cart")
def active_cart():
    cart = ShoppingCart.create()
    cart._events.clear()
    return cart


@given(parsers.cfparse('the cart has variant "{variant_id}" priced {price}'), target_fixture="cart")
def cart_with_variant(cart, variant_id, price):
    cart.add_line(*picked(variant_id, price))
    cart._events.clear()
    return cart


@given("the cart is discarded", target_fixture="cart")
def discarded_cart(cart):
    cart.discard()
    cart._events.clear()
    return cart


# ---------------------------------------------------------------------------
# Then steps: Cart
# ---------------------------------------------------------------------------
@then("the cart action fails with a validation error")
def cart_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} cart event is raised"))
def cart_event_raised(cart, event_type):
    event_cls = _CART_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in cart._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in cart._events]}"
