"""Tests for settings and the gateway factory."""

import pytest
from commerce.config import load_settings
from commerce.gateway import get_gateway, reset_gateway, set_gateway
from commerce.gateway.fake_adapter import FakeCommerceGateway
from commerce.gateway.graphql_adapter import GraphQLCommerceGateway


@pytest.fixture()
def clean_env(monkeypatch):
    for name in (
        "COMMERCE_GATEWAY",
        "SHOPIFY_SHOP_DOMAIN",
        "SHOPIFY_ACCESS_TOKEN",
        "SHOPIFY_API_VERSION",
        "COMMERCE_HTTP_TIMEOUT_SECONDS",
        "ALLOWED_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_gateway()
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.gateway == "fake"
        assert settings.api_version == "2024-10"
        assert settings.http_timeout_seconds == 10.0
        assert settings.allowed_origins == ["*"]

    def test_credentials_select_graphql(self, clean_env):
        clean_env.setenv("SHOPIFY_SHOP_DOMAIN", "demo.myshopify.com")
        clean_env.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_test")
        assert load_settings().gateway == "graphql"

    def test_explicit_gateway_wins(self, clean_env):
        clean_env.setenv("SHOPIFY_SHOP_DOMAIN", "demo.myshopify.com")
        clean_env.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_test")
        clean_env.setenv("COMMERCE_GATEWAY", "FAKE")
        assert load_settings().gateway == "fake"

    def test_allowed_origins_list(self, clean_env):
        clean_env.setenv("ALLOWED_ORIGINS", "https://admin.example.com, ,https://app.example.com")
        assert load_settings().allowed_origins == ["https://admin.example.com", "https://app.example.com"]


class TestGatewayFactory:
    def test_default_is_fake(self, clean_env):
        assert isinstance(get_gateway(), FakeCommerceGateway)

    def test_gateway_is_reused(self, clean_env):
        assert get_gateway() is get_gateway()

    def test_set_gateway_overrides(self, clean_env):
        custom = FakeCommerceGateway()
        set_gateway(custom)
        assert get_gateway() is custom

    def test_graphql_gateway_from_settings(self, clean_env):
        clean_env.setenv("COMMERCE_GATEWAY", "graphql")
        clean_env.setenv("SHOPIFY_SHOP_DOMAIN", "demo.myshopify.com")
        clean_env.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_test")
        clean_env.setenv("SHOPIFY_API_VERSION", "2025-01")

        gateway = get_gateway()

        assert isinstance(gateway, GraphQLCommerceGateway)
        assert gateway.endpoint == "https://demo.myshopify.com/admin/api/2025-01/graphql.json"

    def test_graphql_gateway_needs_credentials(self, clean_env):
        clean_env.setenv("COMMERCE_GATEWAY", "graphql")
        with pytest.raises(RuntimeError):
            get_gateway()
