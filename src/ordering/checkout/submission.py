"""Order submission payload and outcome.

An ``OrderSubmission`` is assembled fresh from a cart for every submit
attempt. A ``SubmissionOutcome`` is the single result the checkout hands
back, whatever happened across the remote calls.
"""

from dataclasses import dataclass

from commerce.gateway.port import DraftLine, UserError

GENERIC_FAILURE_MESSAGE = "Failed to create order. Please try again."
EMPTY_CART_MESSAGE = "Add at least one product to create an order."
IN_FLIGHT_MESSAGE = "An order submission is already in progress."


def parse_tags(raw: str | None) -> tuple[str, ...]:
    """Split comma-separated tag text.

    Blank input yields no tags. Entries are trimmed; empty inner entries are
    kept and repeated entries collapse to their first occurrence.
    """
    if not raw:
        return ()
    return tuple(dict.fromkeys(tag.strip() for tag in raw.split(",")))


@dataclass(frozen=True)
class OrderSubmission:
    lines: tuple[DraftLine, ...]
    customer_id: str | None = None
    tags: tuple[str, ...] = ()
    notes: str | None = None

    @classmethod
    def from_cart(cls, cart, tags: str | None = None, notes: str | None = None) -> "OrderSubmission":
        return cls(
            lines=tuple(DraftLine(variant_id=str(line.variant_id), quantity=line.quantity) for line in cart.lines),
            customer_id=str(cart.customer_id) if cart.customer_id else None,
            tags=parse_tags(tags),
            notes=notes or None,
        )


@dataclass(frozen=True)
class SubmissionOutcome:
    """``success`` with no payload, or a failure carrying user errors in order."""

    success: bool
    errors: tuple[UserError, ...] = ()

    @classmethod
    def succeeded(cls) -> "SubmissionOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, errors) -> "SubmissionOutcome":
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed submission must carry at least one error")
        return cls(success=False, errors=errors)

    @classmethod
    def failed_with(cls, message: str, field: str | None = None) -> "SubmissionOutcome":
        return cls.failed([UserError(message=message, field=field)])
