"""Product creation from the new-product form.

The form is validated locally (a title is required) before anything is
sent; everything else is validated by the remote API and comes back as
user errors.
"""

import structlog
from commerce.gateway.port import CommerceAPIError, CommerceGateway, MutationResult, UserError

logger = structlog.get_logger(__name__)

DEFAULT_STATUS = "DRAFT"
DEFAULT_PRICE = "0.00"


def _parse_inventory(raw) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0


def build_product_input(form: dict) -> dict:
    """Translate form fields into the API's ProductInput.

    Raises ``ValueError`` when the title is blank.
    """
    title = (form.get("title") or "").strip()
    if not title:
        raise ValueError("Title is required")

    tags = [tag.strip() for tag in (form.get("tags") or "").split(",") if tag.strip()]
    product_input = {
        "title": form["title"],
        "descriptionHtml": form.get("description") or "",
        "status": form.get("status") or DEFAULT_STATUS,
        "productType": form.get("product_type") or "",
        "vendor": form.get("vendor") or "",
        "tags": tags,
        "variants": [
            {
                "price": form.get("price") or DEFAULT_PRICE,
                "inventoryQuantity": _parse_inventory(form.get("inventory")),
                "sku": form.get("sku") or "",
                "inventoryManagement": "SHOPIFY",
            }
        ],
    }

    handle = form.get("handle")
    if handle and handle.strip():
        product_input["handle"] = handle

    return product_input


def create_product(gateway: CommerceGateway, form: dict) -> MutationResult:
    try:
        product_input = build_product_input(form)
    except ValueError as exc:
        return MutationResult(user_errors=(UserError(field="title", message=str(exc)),))

    try:
        result = gateway.create_product(product_input)
    except CommerceAPIError as exc:
        logger.error("Product creation failed", title=product_input["title"], error=str(exc))
        return MutationResult(
            user_errors=(UserError(field="general", message=f"Failed to create product: {exc}"),)
        )

    if result.ok:
        logger.info("Product created", product_id=result.resource_id, title=product_input["title"])
    return result
