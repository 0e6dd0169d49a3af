"""Cart line management: commands and handler."""

from commerce.gateway.port import ImageRef, Product, ProductVariant
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class AddLineToCart:
    """Pick a variant from the product picker. Carries the variant as it was displayed."""

    cart_id = Identifier(required=True)
    product_id = String(required=True, max_length=255)
    product_title = String(required=True, max_length=255)
    variant_id = String(required=True, max_length=255)
    variant_title = String(max_length=255)
    unit_price = String(required=True, max_length=32)  # Decimal text, e.g. "19.99"
    image_url = String(max_length=1024)
    image_alt = String(max_length=255)


@ordering.command(part_of="ShoppingCart")
class SetLineQuantity:
    cart_id = Identifier(required=True)
    variant_id = String(required=True, max_length=255)
    raw_quantity = Text()  # As typed, any length; normalized by the cart


@ordering.command(part_of="ShoppingCart")
class RemoveLineFromCart:
    cart_id = Identifier(required=True)
    variant_id = String(required=True, max_length=255)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartLinesHandler:
    @handle(AddLineToCart)
    def add_line_to_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)

        image = ImageRef(url=command.image_url, alt_text=command.image_alt) if command.image_url else None
        product = Product(id=command.product_id, title=command.product_title, handle="")
        variant = ProductVariant(
            id=command.variant_id,
            title=command.variant_title or "Default Title",
            price=command.unit_price,
            image=image,
        )

        cart.add_line(product, variant)
        repo.add(cart)

    @handle(SetLineQuantity)
    def set_line_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.set_quantity(command.variant_id, command.raw_quantity)
        repo.add(cart)

    @handle(RemoveLineFromCart)
    def remove_line_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.remove_line(command.variant_id)
        repo.add(cart)
