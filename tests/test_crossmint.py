"""Tests for the Crossmint orders client, with the API stubbed by httpx.MockTransport."""

import asyncio

import httpx
import pytest

from backend.crossmint import CrossmintClient
from backend.exceptions import ConfigurationError
from backend.orders import CreateOrderRequest
from tests.fakes import RecordingUpstream, order_body


def _request(amount: str = "25.00") -> CreateOrderRequest:
    return CreateOrderRequest(amount=amount, receipt_email="a@b.com", wallet_address="0xAbC123")


class TestBuildOrderPayload:

    def test_single_exact_in_line_item(self, settings):
        client = CrossmintClient(settings, http_client=httpx.AsyncClient())
        payload = client.build_order_payload(_request("25.00"))
        assert payload == {
            "lineItems": [
                {
                    "tokenLocator": "solana:MINT:MINT",
                    "executionParameters": {"mode": "exact-in", "amount": "25.00"},
                }
            ],
            "payment": {"method": "checkoutcom-flow", "receiptEmail": "a@b.com"},
            "recipient": {"walletAddress": "0xAbC123"},
        }


class TestCreateOrder:

    def test_posts_to_orders_endpoint_with_api_key(self, settings):
        upstream = RecordingUpstream(lambda request: httpx.Response(200, json=order_body()))
        client = CrossmintClient(settings, http_client=upstream.client())

        result = asyncio.run(client.create_order(_request()))

        assert result.ok
        assert result.status_code == 200
        assert result.body == order_body()
        assert len(upstream.requests) == 1
        sent = upstream.requests[0]
        assert sent.method == "POST"
        assert str(sent.url) == "https://staging.crossmint.com/api/2022-06-09/orders"
        assert sent.headers["x-api-key"] == "sk_test_key"
        assert sent.headers["content-type"] == "application/json"
        assert upstream.payload()["lineItems"][0]["executionParameters"] == {
            "mode": "exact-in",
            "amount": "25.00",
        }

    def test_returns_rejection_without_raising(self, settings):
        upstream = RecordingUpstream(
            lambda request: httpx.Response(400, json={"error": "amount too low"})
        )
        client = CrossmintClient(settings, http_client=upstream.client())

        result = asyncio.run(client.create_order(_request("0.10")))

        assert not result.ok
        assert result.status_code == 400
        assert result.body == {"error": "amount too low"}

    def test_missing_api_key_makes_no_request(self, unconfigured_settings):
        upstream = RecordingUpstream(lambda request: httpx.Response(200, json=order_body()))
        client = CrossmintClient(unconfigured_settings, http_client=upstream.client())

        with pytest.raises(ConfigurationError):
            asyncio.run(client.create_order(_request()))
        assert upstream.requests == []

    def test_each_call_creates_a_new_order(self, settings):
        upstream = RecordingUpstream(lambda request: httpx.Response(200, json=order_body()))
        client = CrossmintClient(settings, http_client=upstream.client())

        async def twice():
            await client.create_order(_request())
            await client.create_order(_request())

        asyncio.run(twice())
        assert len(upstream.requests) == 2

    def test_transport_error_propagates(self, settings):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = CrossmintClient(settings, http_client=RecordingUpstream(fail).client())

        with pytest.raises(httpx.ConnectError):
            asyncio.run(client.create_order(_request()))

    def test_non_json_body_raises_value_error(self, settings):
        upstream = RecordingUpstream(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))
        client = CrossmintClient(settings, http_client=upstream.client())

        with pytest.raises(ValueError):
            asyncio.run(client.create_order(_request()))
