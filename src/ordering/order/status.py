"""Order status badges and list derivations for the orders screens."""

from commerce.gateway.port import OrderSummary
from shared.badges import Badge, Tone, humanize_status

_FINANCIAL_TONES = {
    "PAID": Tone.SUCCESS,
    "PENDING": Tone.WARNING,
    "REFUNDED": Tone.INFO,
    "PARTIALLY_REFUNDED": Tone.INFO,
}

_FULFILLMENT_TONES = {
    "FULFILLED": Tone.SUCCESS,
    "PARTIALLY_FULFILLED": Tone.WARNING,
    "UNFULFILLED": Tone.CRITICAL,
}


def financial_status_badge(status: str | None) -> Badge:
    # Anything unrecognized (VOIDED, EXPIRED, ...) needs attention
    return Badge(_FINANCIAL_TONES.get(status, Tone.CRITICAL), humanize_status(status))


def fulfillment_status_badge(status: str | None) -> Badge:
    return Badge(_FULFILLMENT_TONES.get(status, Tone.SUBDUED), humanize_status(status))


def total_item_count(order: OrderSummary) -> int:
    return sum(order.line_item_quantities)


def order_gid(order_id: str) -> str:
    """Accept a bare numeric id from a route and return the API's global id."""
    if order_id.startswith("gid://"):
        return order_id
    return f"gid://shopify/Order/{order_id}"
