"""Configurable fake commerce gateway for development and testing.

Simulates the remote commerce API without any network calls. It can be
configured at runtime to return user errors from either draft order step
or to fail at the transport level, which makes it useful for:
- Manual API testing via /commerce/gateway/configure
- Automated tests with predictable outcomes
- Development without a real shop or access token
"""

from uuid import uuid4

from commerce.gateway.port import (
    CommerceGateway,
    CommerceTransportError,
    CompletedOrderResult,
    Customer,
    DraftLine,
    DraftOrderResult,
    MutationResult,
    OrderSummary,
    Product,
    UserError,
)


class FakeCommerceGateway(CommerceGateway):
    """In-memory stand-in for the remote commerce API."""

    def __init__(
        self,
        products: list[Product] | None = None,
        customers: list[Customer] | None = None,
        orders: list[OrderSummary] | None = None,
    ) -> None:
        self.products: list[Product] = list(products or [])
        self.customers: list[Customer] = list(customers or [])
        self.orders: list[OrderSummary] = list(orders or [])
        self.create_errors: list[UserError] = []
        self.complete_errors: list[UserError] = []
        self.mutation_errors: list[UserError] = []
        self.fail_transport: bool = False
        self.calls: list[dict] = []

    def configure(
        self,
        create_errors: list[UserError] | None = None,
        complete_errors: list[UserError] | None = None,
        mutation_errors: list[UserError] | None = None,
        fail_transport: bool = False,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.create_errors = list(create_errors or [])
        self.complete_errors = list(complete_errors or [])
        self.mutation_errors = list(mutation_errors or [])
        self.fail_transport = fail_transport

    def calls_to(self, method: str) -> list[dict]:
        return [call for call in self.calls if call["method"] == method]

    def _record(self, method: str, **kwargs) -> None:
        self.calls.append({"method": method, **kwargs})
        if self.fail_transport:
            raise CommerceTransportError(f"Simulated network failure during {method}")

    # -------------------------------------------------------------------
    # Order workflow
    # -------------------------------------------------------------------
    def create_draft_order(
        self,
        lines: list[DraftLine],
        customer_id: str | None,
        tags: list[str],
        note: str | None,
        use_customer_default_address: bool,
    ) -> DraftOrderResult:
        self._record(
            "create_draft_order",
            lines=[{"variant_id": line.variant_id, "quantity": line.quantity} for line in lines],
            customer_id=customer_id,
            tags=list(tags),
            note=note,
            use_customer_default_address=use_customer_default_address,
        )
        if self.create_errors:
            return DraftOrderResult(user_errors=tuple(self.create_errors))
        return DraftOrderResult(draft_order_id=f"gid://shopify/DraftOrder/{uuid4().int % 10**12}")

    def complete_draft_order(self, draft_order_id: str) -> CompletedOrderResult:
        self._record("complete_draft_order", draft_order_id=draft_order_id)
        if self.complete_errors:
            return CompletedOrderResult(user_errors=tuple(self.complete_errors))

        number = 1000 + len(self.calls_to("complete_draft_order"))
        order = OrderSummary(
            id=f"gid://shopify/Order/{uuid4().int % 10**12}",
            name=f"#{number}",
            display_financial_status="PENDING",
            display_fulfillment_status="UNFULFILLED",
        )
        self.orders.append(order)
        return CompletedOrderResult(order_id=order.id, order_name=order.name)

    # -------------------------------------------------------------------
    # Admin screens
    # -------------------------------------------------------------------
    def list_products(self, first: int = 50) -> list[Product]:
        self._record("list_products", first=first)
        return self.products[:first]

    def list_customers(self, first: int = 50, query: str | None = None) -> list[Customer]:
        self._record("list_customers", first=first, query=query)
        return self.customers[:first]

    def list_orders(self, first: int = 50) -> list[OrderSummary]:
        self._record("list_orders", first=first)
        return self.orders[:first]

    def get_order(self, order_id: str) -> OrderSummary | None:
        self._record("get_order", order_id=order_id)
        return next((order for order in self.orders if order.id == order_id), None)

    def cancel_order(self, order_id: str, reason: str) -> MutationResult:
        self._record("cancel_order", order_id=order_id, reason=reason)
        if self.mutation_errors:
            return MutationResult(user_errors=tuple(self.mutation_errors))
        return MutationResult(resource_id=order_id)

    def delete_order(self, order_id: str) -> MutationResult:
        self._record("delete_order", order_id=order_id)
        if self.mutation_errors:
            return MutationResult(user_errors=tuple(self.mutation_errors))
        self.orders = [order for order in self.orders if order.id != order_id]
        return MutationResult(resource_id=order_id)

    def create_customer(self, customer_input: dict) -> MutationResult:
        self._record("create_customer", input=customer_input)
        if self.mutation_errors:
            return MutationResult(user_errors=tuple(self.mutation_errors))
        customer = Customer(
            id=f"gid://shopify/Customer/{uuid4().int % 10**12}",
            display_name=" ".join(
                part for part in (customer_input.get("firstName"), customer_input.get("lastName")) if part
            ),
            email=customer_input.get("email"),
            first_name=customer_input.get("firstName"),
            last_name=customer_input.get("lastName"),
            phone=customer_input.get("phone"),
        )
        self.customers.append(customer)
        return MutationResult(resource_id=customer.id)

    def create_product(self, product_input: dict) -> MutationResult:
        self._record("create_product", input=product_input)
        if self.mutation_errors:
            return MutationResult(user_errors=tuple(self.mutation_errors))
        product = Product(
            id=f"gid://shopify/Product/{uuid4().int % 10**12}",
            title=product_input["title"],
            handle=product_input.get("handle") or product_input["title"].lower().replace(" ", "-"),
            status=product_input.get("status", "DRAFT"),
        )
        self.products.append(product)
        return MutationResult(resource_id=product.id)
