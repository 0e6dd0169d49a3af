"""Commerce gateway port (abstract interface).

Defines the contract every remote commerce API adapter must implement.
Swapping between FakeCommerceGateway (dev/test) and GraphQLCommerceGateway
(production) never touches domain or application code.

Mutations report field-level validation problems as ``user_errors`` data.
Only transport-level problems are raised, as ``CommerceTransportError``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class CommerceAPIError(Exception):
    """Base class for failures talking to the remote commerce API."""


class CommerceTransportError(CommerceAPIError):
    """Network failure, unexpected HTTP status or malformed response."""


class CommerceQueryError(CommerceTransportError):
    """The API answered with a top-level GraphQL ``errors`` array."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("; ".join(messages) or "GraphQL query failed")


@dataclass(frozen=True)
class UserError:
    """A field-scoped validation failure returned by a mutation."""

    message: str
    field: str | None = None

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ImageRef:
    url: str
    alt_text: str | None = None


@dataclass(frozen=True)
class ProductVariant:
    id: str
    title: str
    price: str
    sku: str | None = None
    inventory_quantity: int | None = None
    image: ImageRef | None = None


@dataclass(frozen=True)
class Product:
    id: str
    title: str
    handle: str
    status: str = "ACTIVE"
    total_inventory: int | None = None
    featured_image: ImageRef | None = None
    variants: tuple[ProductVariant, ...] = ()


@dataclass(frozen=True)
class Customer:
    id: str
    display_name: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    state: str | None = None
    verified_email: bool = True
    email_marketing_state: str | None = None
    sms_marketing_state: str | None = None


@dataclass(frozen=True)
class OrderSummary:
    id: str
    name: str
    display_financial_status: str | None = None
    display_fulfillment_status: str | None = None
    total_amount: str | None = None
    currency_code: str | None = None
    created_at: str | None = None
    customer_name: str | None = None
    tags: tuple[str, ...] = ()
    line_item_quantities: tuple[int, ...] = ()
    cancelled_at: str | None = None


@dataclass(frozen=True)
class DraftLine:
    """Minimal line projection sent to the draft order mutation."""

    variant_id: str
    quantity: int


@dataclass(frozen=True)
class DraftOrderResult:
    """Result of a draft order creation attempt."""

    draft_order_id: str | None = None
    user_errors: tuple[UserError, ...] = ()


@dataclass(frozen=True)
class CompletedOrderResult:
    """Result of completing a draft order into a real order."""

    order_id: str | None = None
    order_name: str | None = None
    user_errors: tuple[UserError, ...] = ()


@dataclass(frozen=True)
class MutationResult:
    """Generic result for admin mutations (cancel, delete, create)."""

    resource_id: str | None = None
    user_errors: tuple[UserError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.user_errors


class CommerceGateway(ABC):
    """Abstract remote commerce API interface."""

    # -------------------------------------------------------------------
    # Order workflow
    # -------------------------------------------------------------------
    @abstractmethod
    def create_draft_order(
        self,
        lines: list[DraftLine],
        customer_id: str | None,
        tags: list[str],
        note: str | None,
        use_customer_default_address: bool,
    ) -> DraftOrderResult:
        """Create a provisional draft order."""
        ...

    @abstractmethod
    def complete_draft_order(self, draft_order_id: str) -> CompletedOrderResult:
        """Turn a draft order into a real order."""
        ...

    # -------------------------------------------------------------------
    # Admin screens
    # -------------------------------------------------------------------
    @abstractmethod
    def list_products(self, first: int = 50) -> list[Product]:
        """Fetch products with their variants."""
        ...

    @abstractmethod
    def list_customers(self, first: int = 50, query: str | None = None) -> list[Customer]:
        """Fetch customers, optionally narrowed by a remote search query."""
        ...

    @abstractmethod
    def list_orders(self, first: int = 50) -> list[OrderSummary]:
        """Fetch recent orders."""
        ...

    @abstractmethod
    def get_order(self, order_id: str) -> OrderSummary | None:
        """Fetch one order, or None when it does not exist."""
        ...

    @abstractmethod
    def cancel_order(self, order_id: str, reason: str) -> MutationResult:
        ...

    @abstractmethod
    def delete_order(self, order_id: str) -> MutationResult:
        ...

    @abstractmethod
    def create_customer(self, customer_input: dict) -> MutationResult:
        ...

    @abstractmethod
    def create_product(self, product_input: dict) -> MutationResult:
        ...
