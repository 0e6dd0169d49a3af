"""FastAPI routes for the Ordering domain: carts and orders."""

from commerce.gateway import get_gateway
from commerce.gateway.port import CommerceAPIError, OrderSummary
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddLineRequest,
    AssignCustomerRequest,
    CartIdResponse,
    CartLineSchema,
    CartResponse,
    CartSnapshotSchema,
    CheckoutRequest,
    CheckoutResponse,
    CreateCartRequest,
    OrderActionResponse,
    OrderListResponse,
    OrderSummaryResponse,
    SetQuantityRequest,
    StatusResponse,
    UserErrorSchema,
)
from ordering.cart.cart import ShoppingCart, to_money
from ordering.cart.items import AddLineToCart, RemoveLineFromCart, SetLineQuantity
from ordering.cart.management import AssignCustomer, ClearCustomer, CreateCart, DiscardCart
from ordering.checkout.placement import PlaceOrder
from ordering.order.actions import cancel_order, delete_order
from ordering.order.status import (
    financial_status_badge,
    fulfillment_status_badge,
    order_gid,
    total_item_count,
)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


def _cart_response(cart: ShoppingCart) -> CartResponse:
    return CartResponse(
        cart_id=str(cart.id),
        status=cart.status,
        customer_id=cart.customer_id,
        lines=[
            CartLineSchema(
                product_id=line.product_id,
                variant_id=line.variant_id,
                product_title=line.product_title,
                variant_title=line.variant_title,
                unit_price=str(to_money(line.unit_price)),
                quantity=line.quantity,
                line_total=str(line.line_total),
                image_url=line.image_url,
                image_alt=line.image_alt,
            )
            for line in cart.lines
        ],
        totals=CartSnapshotSchema(**cart.snapshot().to_dict()),
    )


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    command = CreateCart(customer_id=body.customer_id)
    result = current_domain.process(command, asynchronous=False)
    return CartIdResponse(cart_id=result)


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).get(cart_id)
    return _cart_response(cart)


@cart_router.post("/{cart_id}/lines", response_model=CartResponse)
async def add_cart_line(cart_id: str, body: AddLineRequest) -> CartResponse:
    command = AddLineToCart(
        cart_id=cart_id,
        product_id=body.product_id,
        product_title=body.product_title,
        variant_id=body.variant_id,
        variant_title=body.variant_title,
        unit_price=body.unit_price,
        image_url=body.image_url,
        image_alt=body.image_alt,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(current_domain.repository_for(ShoppingCart).get(cart_id))


@cart_router.put("/{cart_id}/lines/quantity", response_model=CartResponse)
async def set_cart_line_quantity(cart_id: str, variant_id: str, body: SetQuantityRequest) -> CartResponse:
    """Variant ids are global ids containing slashes, so they travel as a query parameter."""
    command = SetLineQuantity(
        cart_id=cart_id,
        variant_id=variant_id,
        raw_quantity=None if body.quantity is None else str(body.quantity),
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(current_domain.repository_for(ShoppingCart).get(cart_id))


@cart_router.delete("/{cart_id}/lines", response_model=CartResponse)
async def remove_cart_line(cart_id: str, variant_id: str) -> CartResponse:
    command = RemoveLineFromCart(cart_id=cart_id, variant_id=variant_id)
    current_domain.process(command, asynchronous=False)
    return _cart_response(current_domain.repository_for(ShoppingCart).get(cart_id))


@cart_router.put("/{cart_id}/customer", response_model=StatusResponse)
async def assign_cart_customer(cart_id: str, body: AssignCustomerRequest) -> StatusResponse:
    command = AssignCustomer(cart_id=cart_id, customer_id=body.customer_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/customer", response_model=StatusResponse)
async def clear_cart_customer(cart_id: str) -> StatusResponse:
    command = ClearCustomer(cart_id=cart_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.put("/{cart_id}/discard", response_model=StatusResponse)
async def discard_cart(cart_id: str) -> StatusResponse:
    command = DiscardCart(cart_id=cart_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.post("/{cart_id}/checkout", status_code=201, response_model=CheckoutResponse)
def checkout_cart(cart_id: str, body: CheckoutRequest):
    """Place the cart's order.

    Success answers 201 and points the screen back to the orders list.
    Any failure answers 422 with the errors to show the user.
    """
    command = PlaceOrder(cart_id=cart_id, tags=body.tags, notes=body.notes)
    outcome = current_domain.process(command, asynchronous=False)

    if outcome.success:
        return CheckoutResponse(success=True, redirect_to="/orders")

    response = CheckoutResponse(
        success=False,
        errors=[UserErrorSchema(field=error.field, message=error.message) for error in outcome.errors],
    )
    return JSONResponse(status_code=422, content=response.model_dump())


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _order_response(order: OrderSummary) -> OrderSummaryResponse:
    return OrderSummaryResponse(
        id=order.id,
        name=order.name,
        created_at=order.created_at,
        customer_name=order.customer_name,
        total_amount=order.total_amount,
        currency_code=order.currency_code,
        item_count=total_item_count(order),
        tags=list(order.tags),
        cancelled=order.cancelled_at is not None,
        financial_status=financial_status_badge(order.display_financial_status).to_dict(),
        fulfillment_status=fulfillment_status_badge(order.display_fulfillment_status).to_dict(),
    )


@order_router.get("", response_model=OrderListResponse)
def list_orders(first: int = 50) -> OrderListResponse:
    try:
        orders = get_gateway().list_orders(first=first)
    except CommerceAPIError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return OrderListResponse(orders=[_order_response(order) for order in orders])


@order_router.get("/{order_id}", response_model=OrderSummaryResponse)
def get_order(order_id: str) -> OrderSummaryResponse:
    try:
        order = get_gateway().get_order(order_gid(order_id))
    except CommerceAPIError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return _order_response(order)


@order_router.post("/{order_id}/cancel", response_model=OrderActionResponse)
def cancel(order_id: str) -> OrderActionResponse:
    result = cancel_order(get_gateway(), order_id)
    return OrderActionResponse(success=result.success, error=result.error, redirect_to=result.redirect_to)


@order_router.delete("/{order_id}", response_model=OrderActionResponse)
def delete(order_id: str) -> OrderActionResponse:
    result = delete_order(get_gateway(), order_id)
    return OrderActionResponse(success=result.success, error=result.error, redirect_to=result.redirect_to)
