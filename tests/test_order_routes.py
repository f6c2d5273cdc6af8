"""Tests for POST /api/create-order."""

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.crossmint import CrossmintClient
from backend.server import create_app
from tests.fakes import RecordingUpstream, order_body

REQUEST = {"amount": "25.00", "receiptEmail": "a@b.com", "walletAddress": "0xAbC123"}


def _setup(settings, handler):
    upstream = RecordingUpstream(handler)
    app = create_app(settings, CrossmintClient(settings, http_client=upstream.client()))
    return TestClient(app), upstream


class TestCreateOrderRoute:

    def test_success_relays_upstream_body_unchanged(self, settings):
        body = order_body(quote={"inputAmount": 25, "outputAmount": 24.5, "feeAmount": 0.5, "totalAmount": 25})
        body["order"]["providerOnlyField"] = {"kept": True}
        client, upstream = _setup(settings, lambda request: httpx.Response(200, json=body))

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == 200
        assert response.json() == body
        assert len(upstream.requests) == 1
        assert upstream.payload()["lineItems"][0]["executionParameters"] == {
            "mode": "exact-in",
            "amount": "25.00",
        }
        assert upstream.payload()["recipient"] == {"walletAddress": "0xAbC123"}

    def test_upstream_created_status_is_reported_as_200(self, settings):
        client, _ = _setup(settings, lambda request: httpx.Response(201, json=order_body()))

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == 200
        assert response.json() == order_body()

    @pytest.mark.parametrize("status", [400, 401, 422, 503])
    def test_rejection_mirrors_upstream_status(self, settings, status):
        upstream_error = {"error": "Invalid wallet address"}
        client, _ = _setup(settings, lambda request: httpx.Response(status, json=upstream_error))

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == status
        assert response.json() == {"error": "Invalid wallet address", "details": upstream_error}

    def test_rejection_without_error_field_uses_generic_message(self, settings):
        upstream_error = {"message": "forbidden"}
        client, _ = _setup(settings, lambda request: httpx.Response(403, json=upstream_error))

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == 403
        assert response.json() == {"error": "Failed to create order", "details": upstream_error}

    def test_missing_api_key_returns_500_without_network_call(self, unconfigured_settings):
        client, upstream = _setup(unconfigured_settings, lambda request: httpx.Response(200, json=order_body()))

        for _ in range(2):
            response = client.post("/api/create-order", json=REQUEST)
            assert response.status_code == 500
            assert response.json() == {
                "error": "Server misconfiguration: CROSSMINT_SERVER_SIDE_API_KEY missing"
            }
        assert upstream.requests == []

    def test_transport_failure_returns_500_with_details(self, settings):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = _setup(settings, fail)

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Unexpected error creating order",
            "details": "connection refused",
        }

    def test_malformed_upstream_body_returns_500(self, settings):
        client, _ = _setup(settings, lambda request: httpx.Response(200, text="not json"))

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Unexpected error creating order"
        assert data["details"]

    def test_missing_field_is_rejected_before_upstream(self, settings):
        client, upstream = _setup(settings, lambda request: httpx.Response(200, json=order_body()))

        response = client.post("/api/create-order", json={"amount": "25.00"})

        assert response.status_code == 422
        assert upstream.requests == []

    def test_success_relays_body_without_order_object(self, settings):
        body = {"order": None, "clientSecret": "s"}
        client, upstream = _setup(settings, lambda request: httpx.Response(200, json=body))

        response = client.post("/api/create-order", json=REQUEST)

        assert response.status_code == 200
        assert response.json() == body
        assert len(upstream.requests) == 1

    def test_missing_api_key_is_reported_before_body_validation(self, unconfigured_settings):
        client, upstream = _setup(unconfigured_settings, lambda request: httpx.Response(200, json=order_body()))

        response = client.post("/api/create-order", json={"amount": "25.00"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Server misconfiguration: CROSSMINT_SERVER_SIDE_API_KEY missing"
        }
        assert upstream.requests == []

    def test_malformed_json_body_returns_500(self, settings):
        client, upstream = _setup(settings, lambda request: httpx.Response(200, json=order_body()))

        response = client.post(
            "/api/create-order",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Unexpected error creating order"
        assert data["details"]
        assert upstream.requests == []


class TestHealth:

    def test_reports_configuration(self, settings):
        client, _ = _setup(settings, lambda request: httpx.Response(200, json={}))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["configured"] is True

    def test_reports_missing_key(self, unconfigured_settings):
        client, _ = _setup(unconfigured_settings, lambda request: httpx.Response(200, json={}))

        assert client.get("/health").json()["configured"] is False
