"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class UserErrorSchema(BaseModel):
    field: str | None = None
    message: str


class BadgeSchema(BaseModel):
    tone: str
    label: str


class CartLineSchema(BaseModel):
    product_id: str
    variant_id: str
    product_title: str
    variant_title: str | None = None
    unit_price: str
    quantity: int
    line_total: str
    image_url: str | None = None
    image_alt: str | None = None


class CartSnapshotSchema(BaseModel):
    subtotal: str
    tax: str
    total: str


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    customer_id: str | None = None


class AddLineRequest(BaseModel):
    """A variant exactly as the product picker displayed it."""

    product_id: str
    product_title: str
    variant_id: str
    variant_title: str | None = None
    unit_price: str = Field(pattern=r"^\d+(\.\d+)?$")
    image_url: str | None = None
    image_alt: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "gid://shopify/Product/1001",
                    "product_title": "Classic Tee",
                    "variant_id": "gid://shopify/ProductVariant/2001",
                    "variant_title": "Black / M",
                    "unit_price": "499.00",
                }
            ]
        }
    }


class SetQuantityRequest(BaseModel):
    quantity: str | int | None = None  # Raw input; the cart normalizes it


class AssignCustomerRequest(BaseModel):
    customer_id: str


class CheckoutRequest(BaseModel):
    tags: str | None = None
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tags": "wholesale, priority",
                    "notes": "Deliver before noon",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Cart Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class CartResponse(BaseModel):
    cart_id: str
    status: str
    customer_id: str | None = None
    lines: list[CartLineSchema]
    totals: CartSnapshotSchema


class CheckoutResponse(BaseModel):
    success: bool
    errors: list[UserErrorSchema] = []
    redirect_to: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class OrderSummaryResponse(BaseModel):
    id: str
    name: str
    created_at: str | None = None
    customer_name: str | None = None
    total_amount: str | None = None
    currency_code: str | None = None
    item_count: int
    tags: list[str] = []
    cancelled: bool = False
    financial_status: BadgeSchema
    fulfillment_status: BadgeSchema


class OrderListResponse(BaseModel):
    orders: list[OrderSummaryResponse]


class OrderActionResponse(BaseModel):
    success: str | None = None
    error: str | None = None
    redirect_to: str | None = None
