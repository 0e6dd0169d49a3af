"""Tests for the order submission payload and outcome."""

import pytest
from commerce.gateway.port import DraftLine, Product, ProductVariant, UserError
from ordering.cart.cart import ShoppingCart
from ordering.checkout.submission import OrderSubmission, SubmissionOutcome, parse_tags

PRODUCT = Product(id="gid://shopify/Product/1", title="Notebook", handle="notebook")


class TestParseTags:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_blank_input_yields_no_tags(self, raw):
        assert parse_tags(raw) == ()

    def test_entries_are_trimmed(self):
        assert parse_tags(" wholesale ,priority") == ("wholesale", "priority")

    def test_empty_inner_entries_are_kept(self):
        assert parse_tags("a,,b") == ("a", "", "b")

    def test_whitespace_only_input_yields_one_empty_tag(self):
        assert parse_tags("   ") == ("",)

    def test_duplicates_collapse_in_first_seen_order(self):
        assert parse_tags("vip, rush, vip ,rush") == ("vip", "rush")


class TestOrderSubmission:
    def test_from_cart_projects_variant_and_quantity(self):
        cart = ShoppingCart.create(customer_id="gid://shopify/Customer/3")
        first = ProductVariant(id="gid://shopify/ProductVariant/1", title="A5", price="4.00")
        second = ProductVariant(id="gid://shopify/ProductVariant/2", title="A4", price="6.00")
        cart.add_line(PRODUCT, first)
        cart.add_line(PRODUCT, second)
        cart.add_line(PRODUCT, first)

        submission = OrderSubmission.from_cart(cart, tags="b2b", notes="Gift wrap")

        assert submission.lines == (
            DraftLine(variant_id="gid://shopify/ProductVariant/1", quantity=2),
            DraftLine(variant_id="gid://shopify/ProductVariant/2", quantity=1),
        )
        assert submission.customer_id == "gid://shopify/Customer/3"
        assert submission.tags == ("b2b",)
        assert submission.notes == "Gift wrap"

    def test_optional_fields_default_to_empty(self):
        submission = OrderSubmission.from_cart(ShoppingCart.create())
        assert submission.lines == ()
        assert submission.customer_id is None
        assert submission.tags == ()
        assert submission.notes is None


class TestSubmissionOutcome:
    def test_succeeded(self):
        outcome = SubmissionOutcome.succeeded()
        assert outcome.success is True
        assert outcome.errors == ()

    def test_failed_keeps_error_order(self):
        errors = [UserError(field="email", message="Email is invalid"), UserError(message="Try later")]
        outcome = SubmissionOutcome.failed(errors)
        assert outcome.success is False
        assert outcome.errors == tuple(errors)

    def test_failure_needs_an_error(self):
        with pytest.raises(ValueError):
            SubmissionOutcome.failed([])

    def test_failed_with_single_message(self):
        outcome = SubmissionOutcome.failed_with("Nope", field="lineItems")
        assert outcome.errors == (UserError(field="lineItems", message="Nope"),)
