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
Crossmint Orders API Client

Creates orders against https://{env}.crossmint.com/api/2022-06-09/orders
using the server-held API key. Each order has a single line item executed
in "exact-in" mode: the fiat amount is exact and Crossmint computes how many
tokens are delivered.

The client makes exactly one request per call. There is no retry and no
idempotency key, so calling create_order twice creates two orders upstream.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

import httpx

from .config import Settings
from .constants import Constants
from .orders import CreateOrderRequest

logger = logging.getLogger(__name__)

constants = Constants()


@dataclass(frozen=True)
class UpstreamResponse:
    """Status code and decoded JSON body of a Crossmint response."""
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class CrossmintClient:
    """
    Thin async client for the Crossmint orders endpoint.

    Args:
        settings: Proxy settings (API key, environment, token locator)
        http_client: Optional httpx client, mainly for tests. When omitted the
            client creates and owns one.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=settings.http_timeout)

    def build_order_payload(self, request: CreateOrderRequest) -> Dict[str, Any]:
        """Build the Crossmint order body for a deposit request."""
        return {
            "lineItems": [
                {
                    "tokenLocator": self.settings.token_locator,
                    "executionParameters": {
                        "mode": constants.EXECUTION_MODE_EXACT_IN,
                        "amount": request.amount,
                    },
                }
            ],
            "payment": {
                "method": constants.PAYMENT_METHOD_CHECKOUTCOM_FLOW,
                "receiptEmail": request.receipt_email,
            },
            "recipient": {
                "walletAddress": request.wallet_address,
            },
        }

    async def create_order(self, request: CreateOrderRequest) -> UpstreamResponse:
        """
        Create an order upstream.

        Args:
            request: The deposit request to forward

        Returns:
            UpstreamResponse with Crossmint's status and body, success or not

        Raises:
            ConfigurationError: If no API key is configured (no request is sent)
            httpx.HTTPError: On transport failures
            ValueError: If Crossmint answers with a body that is not JSON
        """
        api_key = self.settings.require_api_key()
        payload = self.build_order_payload(request)

        logger.info(
            f"Creating Crossmint order: amount={request.amount}, "
            f"locator={self.settings.token_locator}"
        )
        response = await self._http.post(
            self.settings.orders_url,
            json=payload,
            headers={
                "Content-Type": "application/json",
                constants.CROSSMINT_API_KEY_HEADER: api_key,
            },
        )

        body = response.json()
        if response.is_success:
            order = body.get("order") if isinstance(body, dict) else None
            order_id = order.get("orderId") if isinstance(order, dict) else None
            logger.info(f"Crossmint order created: {order_id}")
        else:
            logger.warning(f"Crossmint rejected order with status {response.status_code}")

        return UpstreamResponse(status_code=response.status_code, body=body)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
