"""Product list derivations for the products screen and the order product picker."""

from decimal import Decimal

from commerce.gateway.port import Product
from shared.badges import Badge, Tone

_STATUS_TONES = {
    "ACTIVE": Tone.SUCCESS,
    "DRAFT": Tone.WARNING,
    "ARCHIVED": Tone.CRITICAL,
}


def filter_products(products: list[Product], query: str | None) -> list[Product]:
    """Case-insensitive substring match on title or handle."""
    needle = (query or "").lower()
    if not needle:
        return list(products)
    return [product for product in products if needle in product.title.lower() or needle in product.handle.lower()]


def product_status_badge(status: str | None) -> Badge:
    return Badge(_STATUS_TONES.get(status, Tone.SUBDUED), (status or "unknown").lower())


def primary_variant_price(product: Product) -> Decimal | None:
    if not product.variants:
        return None
    return Decimal(product.variants[0].price)
