"""Customer registration from the new-customer form."""

import structlog
from commerce.gateway.port import CommerceAPIError, CommerceGateway, MutationResult, UserError

logger = structlog.get_logger(__name__)


def build_customer_input(form: dict) -> dict:
    """Translate form fields into the API's CustomerInput."""
    raw_tags = form.get("tags")
    return {
        "firstName": form.get("first_name"),
        "lastName": form.get("last_name"),
        "email": form.get("email"),
        "phone": form.get("phone"),
        "acceptsMarketing": bool(form.get("accepts_marketing")),
        "note": form.get("note"),
        "tags": [tag.strip() for tag in raw_tags.split(",")] if raw_tags else [],
    }


def register_customer(gateway: CommerceGateway, form: dict) -> MutationResult:
    customer_input = build_customer_input(form)
    try:
        result = gateway.create_customer(customer_input)
    except CommerceAPIError as exc:
        logger.error("Customer creation failed", email=customer_input["email"], error=str(exc))
        return MutationResult(
            user_errors=(UserError(field="general", message=f"Failed to create customer: {exc}"),)
        )

    if result.ok:
        logger.info("Customer created", customer_id=result.resource_id)
    else:
        logger.info("Customer creation rejected", errors=[error.to_dict() for error in result.user_errors])
    return result
