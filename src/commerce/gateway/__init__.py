"""Commerce gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeCommerceGateway for development and testing
- GraphQLCommerceGateway for a real shop (selected by settings)
"""

import structlog

from commerce.config import load_settings
from commerce.gateway.fake_adapter import FakeCommerceGateway
from commerce.gateway.port import CommerceGateway

logger = structlog.get_logger(__name__)

_current_gateway: CommerceGateway | None = None


def _build_default_gateway() -> CommerceGateway:
    settings = load_settings()
    if settings.gateway == "graphql":
        if not (settings.shop_domain and settings.access_token):
            raise RuntimeError("COMMERCE_GATEWAY=graphql requires SHOPIFY_SHOP_DOMAIN and SHOPIFY_ACCESS_TOKEN")

        from commerce.gateway.graphql_adapter import GraphQLCommerceGateway

        logger.info("Using GraphQL commerce gateway", shop_domain=settings.shop_domain)
        return GraphQLCommerceGateway(
            shop_domain=settings.shop_domain,
            access_token=settings.access_token,
            api_version=settings.api_version,
            timeout=settings.http_timeout_seconds,
        )

    logger.info("Using fake commerce gateway")
    return FakeCommerceGateway()


def get_gateway() -> CommerceGateway:
    """Return the current commerce gateway, building the default on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _build_default_gateway()
    return _current_gateway


def set_gateway(gateway: CommerceGateway) -> None:
    """Override the active commerce gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the default gateway."""
    global _current_gateway
    _current_gateway = None
