"""Domain events for the ShoppingCart aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartLineAdded:
    """A variant was picked into the cart, either as a new line or by merging."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True)
    variant_id = String(required=True)
    quantity = Integer(required=True)  # Line quantity after the pick


@ordering.event(part_of="ShoppingCart")
class CartLineQuantityChanged:
    """The quantity of a cart line was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    variant_id = String(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartLineRemoved:
    """A line was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    variant_id = String(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCustomerAssigned:
    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = String(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCustomerCleared:
    __version__ = 1

    cart_id = Identifier(required=True)


@ordering.event(part_of="ShoppingCart")
class CartConverted:
    """The cart's order was placed with the commerce platform."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = String()
    line_count = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartDiscarded:
    """The cart was abandoned without placing an order."""

    __version__ = 1

    cart_id = Identifier(required=True)
    discarded_at = DateTime(required=True)
