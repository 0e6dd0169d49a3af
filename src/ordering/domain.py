"""Ordering bounded context: draft order creation from an admin cart.

Holds the admin's working cart (CQRS, in-memory) and the checkout flow
that turns it into a real order through the remote commerce API's
two-phase draft order protocol.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
