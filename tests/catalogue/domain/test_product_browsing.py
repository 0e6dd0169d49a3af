"""Tests for product list filtering and status badges."""

from decimal import Decimal

import pytest
from catalogue.product.browsing import filter_products, primary_variant_price, product_status_badge
from shared.badges import Tone


class TestFilterProducts:
    def test_blank_query_keeps_everything(self, products):
        assert filter_products(products, "") == products
        assert filter_products(products, None) == products

    def test_matches_title_case_insensitively(self, products):
        assert [p.title for p in filter_products(products, "TEE")] == ["Classic Tee"]

    def test_matches_handle(self, products):
        assert [p.title for p in filter_products(products, "summer")] == ["Linen Shirt"]

    def test_no_match(self, products):
        assert filter_products(products, "hoodie") == []


class TestProductStatusBadge:
    @pytest.mark.parametrize(
        "status, tone",
        [
            ("ACTIVE", Tone.SUCCESS),
            ("DRAFT", Tone.WARNING),
            ("ARCHIVED", Tone.CRITICAL),
            ("UNLISTED", Tone.SUBDUED),
        ],
    )
    def test_tone(self, status, tone):
        assert product_status_badge(status).tone == tone

    def test_label_is_lowercase_status(self):
        assert product_status_badge("ACTIVE").label == "active"

    def test_missing_status(self):
        assert product_status_badge(None).label == "unknown"


class TestPrimaryVariantPrice:
    def test_first_variant_price(self, products):
        assert primary_variant_price(products[0]) == Decimal("499")

    def test_product_without_variants(self, products):
        assert primary_variant_price(products[1]) is None
