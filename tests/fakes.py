"""Test doubles for the Crossmint API and the order proxy."""

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional

import httpx

from backend.orders import CreateOrderRequest, CreateOrderResponse


def order_body(
    order_id: str = "ord_123",
    amount: str = "25.00",
    phase: str = "payment",
    quote: Optional[Dict[str, Any]] = None,
    wallet: str = "0xAbC123",
    email: str = "a@b.com",
) -> Dict[str, Any]:
    """A Crossmint create-order response body."""
    line_item: Dict[str, Any] = {
        "tokenLocator": "solana:MINT:MINT",
        "executionParameters": {"mode": "exact-in", "amount": amount},
    }
    if quote is not None:
        line_item["quote"] = quote
    return {
        "order": {
            "orderId": order_id,
            "lineItems": [line_item],
            "recipient": {"walletAddress": wallet},
            "payment": {"method": "checkoutcom-flow", "receiptEmail": email},
            "phase": phase,
        },
        "clientSecret": "secret_abc",
    }


class RecordingUpstream:
    """httpx.MockTransport handler that records every request."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def payload(self, index: int = 0) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


class FakeOrderCreator:
    """Stands in for ProxyOrderClient inside the orchestrator."""

    def __init__(
        self,
        response: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.response = response if response is not None else order_body()
        self.error = error
        self.delay = delay
        self.calls: List[CreateOrderRequest] = []

    async def create_order(self, request: CreateOrderRequest) -> CreateOrderResponse:
        self.calls.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return CreateOrderResponse.model_validate(self.response)
