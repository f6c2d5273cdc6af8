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

"""Client for the order proxy's POST /api/create-order."""

from typing import Optional
import logging

import httpx

from backend.constants import Constants
from backend.orders import CreateOrderRequest, CreateOrderResponse

logger = logging.getLogger(__name__)

constants = Constants()


class OrderCreationError(Exception):
    """Order creation failed; the message is safe to show to the buyer."""


class ProxyOrderClient:
    """
    Calls the order proxy to create a Crossmint order.

    Args:
        base_url: Root URL of the proxy, e.g. http://localhost:3000
        http_client: Optional httpx client (tests pass one with a mock or ASGI
            transport)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def create_order(self, request: CreateOrderRequest) -> CreateOrderResponse:
        """
        Create an order through the proxy.

        Raises:
            OrderCreationError: If the proxy answers with a non-2xx status
            httpx.HTTPError: On transport failures
        """
        response = await self._http.post(constants.CREATE_ORDER_PATH, json=request.to_wire())

        if not response.is_success:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            message = error_data.get("error") if isinstance(error_data, dict) else None
            raise OrderCreationError(message or constants.ERROR_ORDER_FAILED)

        return CreateOrderResponse.model_validate(response.json())

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
