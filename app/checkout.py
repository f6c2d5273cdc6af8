# Copyright 2026 UCP Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Deposit Checkout Orchestrator

Client-side controller for one deposit checkout session. It coordinates the
order proxy, the embedded Crossmint checkout and the host application.

States:
- IDLE: No order yet
- CREATING: Order creation request in flight
- READY: Order id and client secret known, payment surface can be mounted
- PROCESSING: Crossmint reported phase "delivery"
- COMPLETED: Crossmint reported phase "completed" (terminal)
- FAILED: Order creation failed, a plain-text error is shown

Order creation is triggered by update(), which may be called on every input
change. The guard (amount present and valid, no order id, nothing in flight,
no error) is the only thing that keeps a session to a single order, so it is
checked and the in-flight flag set before the first await.

Phase changes arrive through handle_order_update(), typically subscribed to
an OrderEventChannel via bind().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol
import logging

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from backend.constants import Constants
from backend.orders import CreateOrderRequest, CreateOrderResponse, Order, OrderPhase, Quote

from .amounts import AmountValidator, parse_amount
from .breakdown import AmountBreakdown
from .events import OrderEventChannel
from .proxy_client import OrderCreationError

logger = logging.getLogger(__name__)

constants = Constants()


class CheckoutStatus(str, Enum):
    """Logical state of a checkout session."""
    IDLE = "idle"
    CREATING = "creating"
    READY = "ready"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class OrderCreator(Protocol):
    async def create_order(self, request: CreateOrderRequest) -> CreateOrderResponse:
        ...


class CheckoutInputs(BaseModel):
    """Values supplied by the host form. Re-sent on every change."""
    model_config = ConfigDict(frozen=True)

    amount: str = ""
    receipt_email: str = ""
    wallet_address: str = ""

    def to_request(self) -> CreateOrderRequest:
        return CreateOrderRequest(
            amount=self.amount,
            receipt_email=self.receipt_email,
            wallet_address=self.wallet_address,
        )


@dataclass
class CheckoutState:
    """Session-local order state."""
    order_id: str = ""
    client_secret: str = ""
    is_creating_order: bool = False
    order_error: str = ""


class EmbeddedCheckoutProps(BaseModel):
    """Props for mounting the Crossmint embedded checkout."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_id: str
    client_secret: str
    payment: Dict[str, Any]
    appearance: Optional[Dict[str, Any]] = None

    @classmethod
    def fiat_only(
        cls,
        order_id: str,
        client_secret: str,
        receipt_email: str,
        appearance: Optional[Dict[str, Any]] = None,
    ) -> "EmbeddedCheckoutProps":
        """Props with card (fiat) payment enabled and crypto payment disabled."""
        return cls(
            order_id=order_id,
            client_secret=client_secret,
            payment={
                "receiptEmail": receipt_email,
                "crypto": {"enabled": False},
                "fiat": {"enabled": True},
                "defaultMethod": "fiat",
            },
            appearance=appearance,
        )

    def to_props(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CheckoutView(BaseModel):
    """What the checkout should display for the current step and state."""
    step: str
    status: CheckoutStatus
    breakdown: Optional[AmountBreakdown] = None
    is_amount_valid: bool = False
    error: Optional[str] = None
    is_creating_order: bool = False
    embedded_checkout: Optional[EmbeddedCheckoutProps] = None

    @property
    def shows_payment(self) -> bool:
        return self.embedded_checkout is not None


class CheckoutOrchestrator:
    """
    Drives a single deposit checkout session.

    Args:
        creator: Anything with an async create_order(request), usually a
            ProxyOrderClient
        on_processing_payment: Called when the order enters phase "delivery"
        on_payment_completed: Called when the order reaches phase "completed"
        amount_validator: Amount check, defaults to AmountValidator()
        appearance: Optional appearance config passed through to the widget
    """

    def __init__(
        self,
        creator: OrderCreator,
        on_processing_payment: Optional[Callable[[], None]] = None,
        on_payment_completed: Optional[Callable[[], None]] = None,
        amount_validator: Optional[Callable[[str], bool]] = None,
        appearance: Optional[Dict[str, Any]] = None,
    ):
        self.creator = creator
        self.on_processing_payment = on_processing_payment
        self.on_payment_completed = on_payment_completed
        self.amount_validator = amount_validator or AmountValidator()
        self.appearance = appearance

        self.inputs = CheckoutInputs()
        self.state = CheckoutState()
        self.order: Optional[Order] = None
        self.phase = ""

        # Inputs of the attempt that failed, used to re-arm on change
        self._failed_inputs: Optional[CheckoutInputs] = None
        self._session = object()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> CheckoutStatus:
        if self.state.order_error:
            return CheckoutStatus.FAILED
        if self.state.is_creating_order:
            return CheckoutStatus.CREATING
        if not self.state.order_id:
            return CheckoutStatus.IDLE
        if self.phase == OrderPhase.COMPLETED:
            return CheckoutStatus.COMPLETED
        if self.phase == OrderPhase.DELIVERY:
            return CheckoutStatus.PROCESSING
        return CheckoutStatus.READY

    @property
    def is_amount_valid(self) -> bool:
        return bool(self.inputs.amount) and self.amount_validator(self.inputs.amount)

    @property
    def quote(self) -> Optional[Quote]:
        return self.order.quote if self.order else None

    def should_create_order(self) -> bool:
        """Guard for IDLE -> CREATING."""
        return (
            bool(self.inputs.amount)
            and self.is_amount_valid
            and not self.state.order_id
            and not self.state.is_creating_order
            and not self.state.order_error
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def update(self, inputs: CheckoutInputs) -> bool:
        """
        Record the latest host inputs and create the order if the guard holds.

        Safe to call on every change, repeatedly and concurrently: at most one
        order is created per session.

        Returns:
            True if this call created (or tried to create) the order
        """
        self.inputs = inputs

        if self._failed_inputs is not None and inputs != self._failed_inputs:
            logger.info("Checkout inputs changed after a failed order, re-arming")
            self.state.order_error = ""
            self._failed_inputs = None

        if not self.should_create_order():
            return False

        await self._create_order(inputs)
        return True

    async def _create_order(self, inputs: CheckoutInputs) -> None:
        session = self._session
        self.state.is_creating_order = True
        self.state.order_error = ""

        try:
            response = await self.creator.create_order(inputs.to_request())
        except OrderCreationError as e:
            if session is not self._session:
                return
            logger.error(f"Error creating order: {e}")
            self._fail(inputs, str(e))
        except Exception as e:
            if session is not self._session:
                return
            logger.exception("Error creating order")
            self._fail(inputs, str(e))
        else:
            if session is not self._session:
                logger.info(f"Discarding order {response.order.order_id} from a reset session")
                return
            self.state.order_id = response.order.order_id
            self.state.client_secret = response.client_secret
            self.order = response.order
            logger.info(f"Order {self.state.order_id} ready for payment")
        finally:
            if session is self._session:
                self.state.is_creating_order = False

    def _fail(self, inputs: CheckoutInputs, message: str) -> None:
        self.state.order_error = message or constants.ERROR_ORDER_FAILED
        self._failed_inputs = inputs

    def retry(self) -> None:
        """Clear a creation failure so the next update() tries again."""
        if self.status != CheckoutStatus.FAILED:
            return
        logger.info("Retrying order creation")
        self.state.order_error = ""
        self._failed_inputs = None

    def reset(self) -> None:
        """Start a new session. A creation still in flight is discarded."""
        self._session = object()
        self.state = CheckoutState()
        self.order = None
        self.phase = ""
        self._failed_inputs = None

    # ------------------------------------------------------------------
    # Provider updates
    # ------------------------------------------------------------------

    def handle_order_update(self, order: Order) -> None:
        """
        Observe an order pushed by the embedded checkout.

        Notifies the host once per transition into "delivery" and once on
        "completed". Other phases only refresh the stored order (and quote).
        """
        if self.state.order_id and order.order_id != self.state.order_id:
            logger.debug(f"Ignoring update for unrelated order {order.order_id}")
            return
        if self.phase == OrderPhase.COMPLETED:
            return

        previous = self.phase
        self.order = order
        self.phase = order.phase

        if order.phase == previous:
            return

        if order.phase == OrderPhase.COMPLETED:
            logger.info(f"Order {order.order_id} completed")
            if self.on_payment_completed:
                self.on_payment_completed()
        elif order.phase == OrderPhase.DELIVERY:
            logger.info(f"Order {order.order_id} is being delivered")
            if self.on_processing_payment:
                self.on_processing_payment()

    def bind(self, channel: OrderEventChannel) -> Callable[[], None]:
        """Subscribe to order updates. Returns the unsubscribe callable."""
        return channel.subscribe(self.handle_order_update)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, step: str = constants.STEP_OPTIONS) -> CheckoutView:
        """Compute what to display for the given UI step."""
        is_amount_valid = self.is_amount_valid
        error = self.state.order_error or None

        breakdown = None
        if step == constants.STEP_OPTIONS:
            breakdown = AmountBreakdown.from_quote(
                self.quote,
                parse_amount(self.inputs.amount),
                is_amount_valid,
            )

        embedded = None
        if (
            self.inputs.amount
            and is_amount_valid
            and self.state.order_id
            and self.state.client_secret
            and not self.state.is_creating_order
            and not error
        ):
            embedded = EmbeddedCheckoutProps.fiat_only(
                order_id=self.state.order_id,
                client_secret=self.state.client_secret,
                receipt_email=self.inputs.receipt_email,
                appearance=self.appearance,
            )

        return CheckoutView(
            step=step,
            status=self.status,
            breakdown=breakdown,
            is_amount_valid=is_amount_valid,
            error=error,
            is_creating_order=self.state.is_creating_order and not error,
            embedded_checkout=embedded,
        )
