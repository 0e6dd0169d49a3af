"""Admin actions on placed orders: cancel and delete.

Both report the first user error's message, which is what the order
detail screen shows in its banner. Transport failures are reported the
same way instead of propagating.
"""

from dataclasses import dataclass

import structlog
from commerce.gateway.port import CommerceAPIError, CommerceGateway

from ordering.order.status import order_gid

logger = structlog.get_logger(__name__)

CANCEL_REASON = "OTHER"


@dataclass(frozen=True)
class OrderActionResult:
    success: str | None = None
    error: str | None = None
    redirect_to: str | None = None


def cancel_order(gateway: CommerceGateway, order_id: str) -> OrderActionResult:
    try:
        result = gateway.cancel_order(order_gid(order_id), reason=CANCEL_REASON)
    except CommerceAPIError as exc:
        logger.error("Order cancellation failed", order_id=order_id, error=str(exc))
        return OrderActionResult(error=str(exc))

    if result.user_errors:
        logger.info("Order cancellation rejected", order_id=order_id, error=result.user_errors[0].message)
        return OrderActionResult(error=result.user_errors[0].message)

    logger.info("Order cancelled", order_id=order_id)
    return OrderActionResult(success="Order cancelled successfully")


def delete_order(gateway: CommerceGateway, order_id: str) -> OrderActionResult:
    try:
        result = gateway.delete_order(order_gid(order_id))
    except CommerceAPIError as exc:
        logger.error("Order deletion failed", order_id=order_id, error=str(exc))
        return OrderActionResult(error=str(exc))

    if result.user_errors:
        logger.info("Order deletion rejected", order_id=order_id, error=result.user_errors[0].message)
        return OrderActionResult(error=result.user_errors[0].message)

    logger.info("Order deleted", order_id=order_id)
    return OrderActionResult(success="Order deleted", redirect_to="/orders")
