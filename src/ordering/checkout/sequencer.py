"""Order Submission Sequencer: places an order through the draft order protocol.

The remote commerce API creates real orders in two steps: a draft order is
created from the lines, then completed. The second call needs the id
produced by the first, so the calls are strictly sequential.

Flow:
    IDLE → CREATING → CREATE_FAILED (user errors or transport fault, end)
                    → CREATED → COMPLETING → COMPLETE_FAILED (end)
                                           → COMPLETED (end)

Every failure is terminal for the invocation and returned as data. Nothing
is retried: submitting again starts over and creates another draft. When
completion fails the draft is left on the remote side; its id is logged
but never handed back to the caller.

A sequencer refuses a second submit while one is in flight.
"""

import threading
from enum import Enum
from weakref import WeakValueDictionary

import structlog
from commerce.gateway import get_gateway
from commerce.gateway.port import CommerceAPIError, CommerceGateway

from ordering.checkout.submission import (
    EMPTY_CART_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
    IN_FLIGHT_MESSAGE,
    OrderSubmission,
    SubmissionOutcome,
)

logger = structlog.get_logger(__name__)


class SubmissionState(Enum):
    IDLE = "Idle"
    CREATING = "Creating"
    CREATE_FAILED = "Create_Failed"
    CREATED = "Created"
    COMPLETING = "Completing"
    COMPLETE_FAILED = "Complete_Failed"
    COMPLETED = "Completed"


_VALID_TRANSITIONS = {
    SubmissionState.IDLE: {SubmissionState.CREATING},
    SubmissionState.CREATING: {SubmissionState.CREATE_FAILED, SubmissionState.CREATED},
    SubmissionState.CREATED: {SubmissionState.COMPLETING},
    SubmissionState.COMPLETING: {SubmissionState.COMPLETE_FAILED, SubmissionState.COMPLETED},
    SubmissionState.CREATE_FAILED: set(),  # Terminal
    SubmissionState.COMPLETE_FAILED: set(),  # Terminal
    SubmissionState.COMPLETED: set(),  # Terminal
}

# Where a transport fault lands, by the step it interrupted
_FAULT_STATES = {
    SubmissionState.CREATING: SubmissionState.CREATE_FAILED,
    SubmissionState.COMPLETING: SubmissionState.COMPLETE_FAILED,
}


class OrderSubmissionSequencer:
    def __init__(self, gateway: CommerceGateway) -> None:
        self.gateway = gateway
        self.state = SubmissionState.IDLE
        self._in_flight = threading.Lock()

    @property
    def in_flight(self) -> bool:
        return self._in_flight.locked()

    def _transition(self, new_state: SubmissionState) -> None:
        if new_state not in _VALID_TRANSITIONS[self.state]:
            raise RuntimeError(f"Invalid submission transition {self.state.value} -> {new_state.value}")
        self.state = new_state

    def submit(self, submission: OrderSubmission) -> SubmissionOutcome:
        if not submission.lines:
            logger.info("Rejected order submission with no lines")
            return SubmissionOutcome.failed_with(EMPTY_CART_MESSAGE, field="lineItems")

        if not self._in_flight.acquire(blocking=False):
            logger.warning("Rejected concurrent order submission", state=self.state.value)
            return SubmissionOutcome.failed_with(IN_FLIGHT_MESSAGE)

        try:
            self.state = SubmissionState.IDLE
            return self._place(submission)
        except CommerceAPIError as exc:
            failed_state = _FAULT_STATES.get(self.state, self.state)
            logger.error(
                "Order submission failed at transport level",
                state=self.state.value,
                error=str(exc),
                exc_info=True,
            )
            self.state = failed_state
            return SubmissionOutcome.failed_with(GENERIC_FAILURE_MESSAGE)
        finally:
            self._in_flight.release()

    def _place(self, submission: OrderSubmission) -> SubmissionOutcome:
        self._transition(SubmissionState.CREATING)
        created = self.gateway.create_draft_order(
            lines=list(submission.lines),
            customer_id=submission.customer_id,
            tags=list(submission.tags),
            note=submission.notes,
            use_customer_default_address=True,
        )
        if created.user_errors:
            self._transition(SubmissionState.CREATE_FAILED)
            logger.info(
                "Draft order rejected",
                errors=[error.to_dict() for error in created.user_errors],
            )
            return SubmissionOutcome.failed(created.user_errors)

        self._transition(SubmissionState.CREATED)
        self._transition(SubmissionState.COMPLETING)

        completed = self.gateway.complete_draft_order(created.draft_order_id)
        if completed.user_errors:
            self._transition(SubmissionState.COMPLETE_FAILED)
            logger.warning(
                "Draft order created but not completed",
                draft_order_id=created.draft_order_id,
                errors=[error.to_dict() for error in completed.user_errors],
            )
            return SubmissionOutcome.failed(completed.user_errors)

        self._transition(SubmissionState.COMPLETED)
        logger.info(
            "Order placed",
            order_id=completed.order_id,
            order_name=completed.order_name,
            line_count=len(submission.lines),
        )
        return SubmissionOutcome.succeeded()


_sequencers: "WeakValueDictionary[str, OrderSubmissionSequencer]" = WeakValueDictionary()
_registry_lock = threading.Lock()


def sequencer_for(cart_id: str) -> OrderSubmissionSequencer:
    """Return the sequencer serving a cart, shared while any caller holds it."""
    with _registry_lock:
        sequencer = _sequencers.get(cart_id)
        if sequencer is None:
            sequencer = OrderSubmissionSequencer(get_gateway())
            _sequencers[cart_id] = sequencer
        return sequencer
