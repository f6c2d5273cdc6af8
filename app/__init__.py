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
Deposit Checkout Client Package

Client side of the deposit checkout:
- checkout: Order creation / phase orchestration for one session
- proxy_client: Client for the order proxy
- events: Channel for order updates pushed by the embedded checkout
- breakdown: Cost breakdown shown while picking an amount
- amounts: Amount parsing and validation
- appearance: Default look of the embedded checkout widget
- cmd: Command line interface
"""

from .amounts import AmountValidator, is_valid_amount, parse_amount
from .appearance import CHECKOUT_APPEARANCE
from .breakdown import AmountBreakdown
from .checkout import (
    CheckoutInputs,
    CheckoutOrchestrator,
    CheckoutState,
    CheckoutStatus,
    CheckoutView,
    EmbeddedCheckoutProps,
)
from .events import OrderEventChannel
from .proxy_client import OrderCreationError, ProxyOrderClient

__all__ = [
    "AmountValidator",
    "is_valid_amount",
    "parse_amount",
    "CHECKOUT_APPEARANCE",
    "AmountBreakdown",
    "CheckoutInputs",
    "CheckoutOrchestrator",
    "CheckoutState",
    "CheckoutStatus",
    "CheckoutView",
    "EmbeddedCheckoutProps",
    "OrderEventChannel",
    "OrderCreationError",
    "ProxyOrderClient",
]
