"""Cart management: commands and handler.

Handles cart creation, customer selection and discarding a cart.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class CreateCart:
    """Open a new cart for an order being created in the admin."""

    customer_id = String(max_length=255)  # Optional


@ordering.command(part_of="ShoppingCart")
class AssignCustomer:
    cart_id = Identifier(required=True)
    customer_id = String(required=True, max_length=255)


@ordering.command(part_of="ShoppingCart")
class ClearCustomer:
    cart_id = Identifier(required=True)


@ordering.command(part_of="ShoppingCart")
class DiscardCart:
    """The admin left the order page without saving."""

    cart_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = ShoppingCart.create(customer_id=command.customer_id)
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)

    @handle(AssignCustomer)
    def assign_customer(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.assign_customer(command.customer_id)
        repo.add(cart)

    @handle(ClearCustomer)
    def clear_customer(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.clear_customer()
        repo.add(cart)

    @handle(DiscardCart)
    def discard_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.discard()
        repo.add(cart)
