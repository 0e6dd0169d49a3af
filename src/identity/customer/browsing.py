"""Customer list derivations for the customers screen and the order customer picker."""

from commerce.gateway.port import Customer
from shared.badges import Badge, Tone

# Account states checked in this order; the first match wins
_STATE_BADGES = {
    "DISABLED": Badge(Tone.CRITICAL, "Disabled"),
    "INVITED": Badge(Tone.WARNING, "Invited"),
    "DECLINED": Badge(Tone.ATTENTION, "Declined"),
}


def filter_customers(customers: list[Customer], query: str | None) -> list[Customer]:
    """Case-insensitive substring match on display name or email."""
    needle = (query or "").lower()
    if not needle:
        return list(customers)
    return [
        customer
        for customer in customers
        if needle in customer.display_name.lower() or needle in (customer.email or "").lower()
    ]


def customer_status_badge(customer: Customer) -> Badge:
    if customer.state in _STATE_BADGES:
        return _STATE_BADGES[customer.state]
    if not customer.verified_email:
        return Badge(Tone.WARNING, "Unverified")
    return Badge(Tone.SUCCESS, "Active")


def marketing_status_badge(customer: Customer) -> Badge:
    consents = (customer.email_marketing_state, customer.sms_marketing_state)
    if "SUBSCRIBED" in consents:
        return Badge(Tone.SUCCESS, "Subscribed")
    if "UNSUBSCRIBED" in consents:
        return Badge(Tone.CRITICAL, "Unsubscribed")
    return Badge(Tone.ATTENTION, "Not subscribed")
