"""Shopping Cart aggregate: the working set of lines for one order being created.

The cart is a standard CQRS aggregate (not event sourced) held in the
in-memory provider. It accumulates product variants picked in the admin's
product picker, merging repeated picks of the same variant, and derives
subtotal, tax and total on every read. Prices are snapshotted when a
variant is picked and never re-fetched.

A cart is discarded, never reused, once its order is placed.
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from commerce.gateway.port import Product, ProductVariant
from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from ordering.cart.events import (
    CartConverted,
    CartCustomerAssigned,
    CartCustomerCleared,
    CartDiscarded,
    CartLineAdded,
    CartLineQuantityChanged,
    CartLineRemoved,
)
from ordering.domain import ordering

# GST applied to every cart
TAX_RATE = Decimal("0.18")
CENTS = Decimal("0.01")

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


class CartStatus(Enum):
    ACTIVE = "Active"
    CONVERTED = "Converted"
    DISCARDED = "Discarded"


def parse_quantity(raw_value) -> int:
    """Read a quantity typed by the user, never returning less than 1.

    Only the leading integer counts, so ``"4abc"`` and ``"2.9"`` read as 4
    and 2. Anything unparseable becomes 1.
    """
    if isinstance(raw_value, int) and not isinstance(raw_value, bool):
        value = raw_value
    else:
        match = _LEADING_INTEGER.match(str(raw_value)) if raw_value is not None else None
        if match is None:
            return 1
        value = int(match.group(1))
    return max(1, value)


def to_money(value) -> Decimal:
    return Decimal(str(value))


@dataclass(frozen=True)
class CartSnapshot:
    """Totals derived from the cart's current lines."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def to_dict(self) -> dict:
        return {
            "subtotal": str(self.subtotal),
            "tax": str(self.tax),
            "total": str(self.total),
        }


@ordering.entity(part_of="ShoppingCart")
class CartLine:
    product_id = String(required=True, max_length=255)  # Remote product gid
    variant_id = String(required=True, max_length=255)  # Remote variant gid, unique per cart
    product_title = String(required=True, max_length=255)
    variant_title = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    image_url = String(max_length=1024)
    image_alt = String(max_length=255)
    added_at = DateTime()

    @property
    def line_total(self) -> Decimal:
        return to_money(self.unit_price) * self.quantity


@ordering.aggregate
class ShoppingCart:
    customer_id = String(max_length=255)  # Remote customer gid, optional
    lines = HasMany(CartLine)
    status = String(choices=CartStatus, default=CartStatus.ACTIVE.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_variant(self):
        variant_ids = [str(line.variant_id) for line in self.lines]
        if len(variant_ids) != len(set(variant_ids)):
            raise ValidationError({"lines": ["A variant can appear only once in a cart"]})

    @invariant.post
    def converted_cart_must_have_lines(self):
        if self.status == CartStatus.CONVERTED.value and not self.lines:
            raise ValidationError({"cart": ["Cannot convert an empty cart to an order"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id=None):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            status=CartStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )

    def _ensure_active(self, message):
        if CartStatus(self.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": [message]})

    def line_for(self, variant_id):
        return next((line for line in self.lines if str(line.variant_id) == str(variant_id)), None)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_line(self, product: Product, variant: ProductVariant):
        """Add one unit of a variant, merging with an existing line for it."""
        self._ensure_active("Lines can only be added to an active cart")

        now = datetime.now(UTC)
        existing = self.line_for(variant.id)

        if existing:
            existing.quantity += 1
            quantity = existing.quantity
        else:
            image = variant.image or product.featured_image
            self.add_lines(
                CartLine(
                    product_id=product.id,
                    variant_id=variant.id,
                    product_title=product.title,
                    variant_title=variant.title,
                    unit_price=float(to_money(variant.price)),
                    quantity=1,
                    image_url=image.url if image else None,
                    image_alt=image.alt_text if image else None,
                    added_at=now,
                )
            )
            quantity = 1

        self.updated_at = now

        self.raise_(
            CartLineAdded(
                cart_id=str(self.id),
                product_id=str(product.id),
                variant_id=str(variant.id),
                quantity=quantity,
            )
        )

    def set_quantity(self, variant_id, raw_value):
        """Set a line's quantity from raw user input; unknown variants are ignored."""
        self._ensure_active("Line quantities can only be changed in an active cart")

        line = self.line_for(variant_id)
        if line is None:
            return

        new_quantity = parse_quantity(raw_value)
        if new_quantity == line.quantity:
            return

        previous_quantity = line.quantity
        line.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineQuantityChanged(
                cart_id=str(self.id),
                variant_id=str(variant_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_line(self, variant_id):
        """Remove a line; unknown variants are ignored."""
        self._ensure_active("Lines can only be removed from an active cart")

        line = self.line_for(variant_id)
        if line is None:
            return

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartLineRemoved(cart_id=str(self.id), variant_id=str(variant_id)))

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def snapshot(self) -> CartSnapshot:
        subtotal = sum((line.line_total for line in self.lines), Decimal("0")).quantize(CENTS, ROUND_HALF_UP)
        tax = (subtotal * TAX_RATE).quantize(CENTS, ROUND_HALF_UP)
        return CartSnapshot(subtotal=subtotal, tax=tax, total=subtotal + tax)

    # -------------------------------------------------------------------
    # Customer
    # -------------------------------------------------------------------
    def assign_customer(self, customer_id):
        self._ensure_active("Customers can only be assigned to an active cart")

        self.customer_id = customer_id
        self.updated_at = datetime.now(UTC)
        self.raise_(CartCustomerAssigned(cart_id=str(self.id), customer_id=str(customer_id)))

    def clear_customer(self):
        self._ensure_active("Customers can only be removed from an active cart")
        if not self.customer_id:
            return

        self.customer_id = None
        self.updated_at = datetime.now(UTC)
        self.raise_(CartCustomerCleared(cart_id=str(self.id)))

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def convert(self):
        """Mark the cart as turned into a placed order."""
        self._ensure_active("Only active carts can be converted")
        if not self.lines:
            raise ValidationError({"cart": ["Cannot convert an empty cart"]})

        self.status = CartStatus.CONVERTED.value
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartConverted(
                cart_id=str(self.id),
                customer_id=str(self.customer_id) if self.customer_id else None,
                line_count=len(self.lines),
            )
        )

    def discard(self):
        """Abandon the cart without placing an order."""
        self._ensure_active("Only active carts can be discarded")

        now = datetime.now(UTC)
        self.status = CartStatus.DISCARDED.value
        self.updated_at = now

        self.raise_(CartDiscarded(cart_id=str(self.id), discarded_at=now))
