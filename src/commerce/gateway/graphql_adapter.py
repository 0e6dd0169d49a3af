"""GraphQL Admin API adapter (production).

Talks to ``https://{shop_domain}/admin/api/{api_version}/graphql.json``
with an access token obtained by the host platform's session layer. The
token is treated as an opaque capability.
"""

import httpx
import structlog

from commerce.gateway import documents
from commerce.gateway.port import (
    CommerceGateway,
    CommerceQueryError,
    CommerceTransportError,
    CompletedOrderResult,
    Customer,
    DraftLine,
    DraftOrderResult,
    ImageRef,
    MutationResult,
    OrderSummary,
    Product,
    ProductVariant,
    UserError,
)

logger = structlog.get_logger(__name__)


class GraphQLCommerceGateway(CommerceGateway):
    """Remote commerce gateway backed by the GraphQL Admin API."""

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: str = "2024-10",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.shop_domain = shop_domain
        self.api_version = api_version
        self.endpoint = f"https://{shop_domain}/admin/api/{api_version}/graphql.json"
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={
                "X-Shopify-Access-Token": access_token,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    def close(self) -> None:
        self._client.close()

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    def execute(self, document: str, variables: dict | None = None) -> dict:
        """POST a GraphQL document and return its ``data`` payload."""
        try:
            response = self._client.post(
                self.endpoint,
                json={"query": document, "variables": variables or {}},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise CommerceTransportError(
                f"Commerce API responded with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CommerceTransportError(f"Commerce API request failed: {exc}") from exc
        except ValueError as exc:
            raise CommerceTransportError("Commerce API returned malformed JSON") from exc

        if not isinstance(payload, dict):
            raise CommerceTransportError("Commerce API returned an unexpected payload")

        if payload.get("errors"):
            messages = _error_messages(payload["errors"])
            logger.warning("GraphQL query returned errors", endpoint=self.endpoint, errors=messages)
            raise CommerceQueryError(messages)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise CommerceTransportError("Commerce API response has no data")
        return data

    def _mutation_payload(self, data: dict, root: str) -> dict:
        payload = data.get(root)
        if not isinstance(payload, dict) or "userErrors" not in payload:
            raise CommerceTransportError(f"Commerce API response is missing {root}")
        return payload

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
        variables = {
            "input": {
                "lineItems": [{"variantId": line.variant_id, "quantity": line.quantity} for line in lines],
                "customerId": customer_id,
                "tags": list(tags),
                "note": note,
                "useCustomerDefaultAddress": use_customer_default_address,
            }
        }
        data = self.execute(documents.DRAFT_ORDER_CREATE, variables)
        payload = self._mutation_payload(data, "draftOrderCreate")

        user_errors = _user_errors(payload)
        if user_errors:
            return DraftOrderResult(user_errors=user_errors)

        draft = _child(payload, "draftOrder", "draftOrderCreate")
        if not draft.get("id"):
            raise CommerceTransportError("draftOrderCreate returned no draft order id")
        return DraftOrderResult(draft_order_id=draft["id"])

    def complete_draft_order(self, draft_order_id: str) -> CompletedOrderResult:
        data = self.execute(documents.DRAFT_ORDER_COMPLETE, {"id": draft_order_id})
        payload = self._mutation_payload(data, "draftOrderComplete")

        user_errors = _user_errors(payload)
        if user_errors:
            return CompletedOrderResult(user_errors=user_errors)

        order = _child(_child(payload, "draftOrder", "draftOrderComplete"), "order", "draftOrderComplete")
        return CompletedOrderResult(order_id=order.get("id"), order_name=order.get("name"))

    # -------------------------------------------------------------------
    # Admin screens
    # -------------------------------------------------------------------
    def list_products(self, first: int = 50) -> list[Product]:
        data = self.execute(documents.PRODUCTS_QUERY, {"first": first})
        return _mapped(data, "products", _product)

    def list_customers(self, first: int = 50, query: str | None = None) -> list[Customer]:
        data = self.execute(documents.CUSTOMERS_QUERY, {"first": first, "query": query or None})
        return _mapped(data, "customers", _customer)

    def list_orders(self, first: int = 50) -> list[OrderSummary]:
        data = self.execute(documents.ORDERS_QUERY, {"first": first})
        return _mapped(data, "orders", _order)

    def get_order(self, order_id: str) -> OrderSummary | None:
        data = self.execute(documents.ORDER_QUERY, {"id": order_id})
        node = _child(data, "order", "order")
        if not node:
            return None
        try:
            return _order(node)
        except (AttributeError, KeyError, TypeError) as exc:
            raise CommerceTransportError("Commerce API returned a malformed order") from exc

    def cancel_order(self, order_id: str, reason: str) -> MutationResult:
        data = self.execute(documents.ORDER_CANCEL, {"id": order_id, "reason": reason})
        payload = self._mutation_payload(data, "orderCancel")
        return MutationResult(
            resource_id=_child(payload, "order", "orderCancel").get("id"),
            user_errors=_user_errors(payload),
        )

    def delete_order(self, order_id: str) -> MutationResult:
        data = self.execute(documents.ORDER_DELETE, {"id": order_id})
        payload = self._mutation_payload(data, "orderDelete")
        return MutationResult(resource_id=payload.get("deletedOrderId"), user_errors=_user_errors(payload))

    def create_customer(self, customer_input: dict) -> MutationResult:
        data = self.execute(documents.CUSTOMER_CREATE, {"input": customer_input})
        payload = self._mutation_payload(data, "customerCreate")
        return MutationResult(
            resource_id=_child(payload, "customer", "customerCreate").get("id"),
            user_errors=_user_errors(payload),
        )

    def create_product(self, product_input: dict) -> MutationResult:
        data = self.execute(documents.PRODUCT_CREATE, {"input": product_input})
        payload = self._mutation_payload(data, "productCreate")
        return MutationResult(
            resource_id=_child(payload, "product", "productCreate").get("id"),
            user_errors=_user_errors(payload),
        )


# ---------------------------------------------------------------------------
# Response mapping
# ---------------------------------------------------------------------------
def _error_messages(errors) -> list[str]:
    """Top-level ``errors`` may be a list of objects, of strings, or a bare string."""
    if not isinstance(errors, list):
        return [str(errors)]
    return [str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors]


def _child(payload: dict, key: str, root: str) -> dict:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise CommerceTransportError(f"Commerce API returned a malformed {root} response")
    return value


def _user_errors(payload: dict) -> tuple[UserError, ...]:
    raw_errors = payload.get("userErrors") or []
    if not isinstance(raw_errors, list) or not all(isinstance(error, dict) for error in raw_errors):
        raise CommerceTransportError("Commerce API returned malformed userErrors")

    errors = []
    for error in raw_errors:
        field = error.get("field")
        if isinstance(field, list):
            field = ".".join(str(part) for part in field)
        errors.append(UserError(message=str(error.get("message") or ""), field=field))
    return tuple(errors)


def _mapped(data: dict, root: str, mapper) -> list:
    try:
        return [mapper(edge["node"]) for edge in data[root]["edges"]]
    except (AttributeError, KeyError, TypeError) as exc:
        raise CommerceTransportError(f"Commerce API returned a malformed {root} connection") from exc


def _image(raw: dict | None) -> ImageRef | None:
    if not raw or not raw.get("url"):
        return None
    return ImageRef(url=raw["url"], alt_text=raw.get("altText"))


def _product(node: dict) -> Product:
    variants = tuple(
        ProductVariant(
            id=variant["id"],
            title=variant.get("title") or "Default Title",
            price=str(variant.get("price") or "0"),
            sku=variant.get("sku") or None,
            inventory_quantity=variant.get("inventoryQuantity"),
            image=_image(variant.get("image")),
        )
        for variant in (edge["node"] for edge in (node.get("variants") or {}).get("edges", []))
    )
    return Product(
        id=node["id"],
        title=node.get("title") or "",
        handle=node.get("handle") or "",
        status=node.get("status") or "ACTIVE",
        total_inventory=node.get("totalInventory"),
        featured_image=_image(node.get("featuredImage")),
        variants=variants,
    )


def _customer(node: dict) -> Customer:
    return Customer(
        id=node["id"],
        display_name=node.get("displayName") or "",
        email=node.get("email"),
        first_name=node.get("firstName"),
        last_name=node.get("lastName"),
        phone=node.get("phone"),
        state=node.get("state"),
        verified_email=bool(node.get("verifiedEmail", True)),
        email_marketing_state=(node.get("emailMarketingConsent") or {}).get("marketingState"),
        sms_marketing_state=(node.get("smsMarketingConsent") or {}).get("marketingState"),
    )


def _order(node: dict) -> OrderSummary:
    money = ((node.get("totalPriceSet") or {}).get("shopMoney")) or {}
    customer = node.get("customer") or {}
    customer_name = " ".join(part for part in (customer.get("firstName"), customer.get("lastName")) if part)
    quantities = tuple(
        edge["node"].get("quantity", 0) for edge in (node.get("lineItems") or {}).get("edges", [])
    )
    return OrderSummary(
        id=node["id"],
        name=node.get("name") or "",
        display_financial_status=node.get("displayFinancialStatus"),
        display_fulfillment_status=node.get("displayFulfillmentStatus"),
        total_amount=money.get("amount"),
        currency_code=money.get("currencyCode"),
        created_at=node.get("createdAt"),
        customer_name=customer_name or None,
        tags=tuple(node.get("tags") or ()),
        line_item_quantities=quantities,
        cancelled_at=node.get("cancelledAt"),
    )
