"""Order placement: command and handler turning a cart into an order."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import CartStatus, ShoppingCart
from ordering.checkout.sequencer import sequencer_for
from ordering.checkout.submission import OrderSubmission
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class PlaceOrder:
    cart_id = Identifier(required=True)
    tags = String(max_length=1000)  # Comma-separated, as typed
    notes = Text()


@ordering.command_handler(part_of=ShoppingCart)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        if CartStatus(cart.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": ["Only active carts can be checked out"]})

        submission = OrderSubmission.from_cart(cart, tags=command.tags, notes=command.notes)
        outcome = sequencer_for(str(cart.id)).submit(submission)

        if outcome.success:
            cart.convert()
            repo.add(cart)

        return outcome
