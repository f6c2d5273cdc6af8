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
FastAPI Routes for Order Creation

POST /api/create-order forwards a deposit request to Crossmint and relays the
result:
- 200 with Crossmint's body unchanged on success
- Crossmint's status with {error, details} when Crossmint rejects the order
- 500 with {error} when the server API key is missing, checked before the
  body is read
- 500 with {error, details} when the body is not JSON or on any unexpected
  failure
- 422 when the JSON body is missing a field
"""

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from .constants import Constants
from .crossmint import CrossmintClient
from .exceptions import ConfigurationError
from .orders import CreateOrderRequest

logger = logging.getLogger(__name__)

constants = Constants()

# Create router
router = APIRouter(prefix="/api", tags=["Orders"])


def get_crossmint_client(request: Request) -> CrossmintClient:
    """Crossmint client attached to the application at startup."""
    return request.app.state.crossmint


@router.post("/create-order")
async def create_order(request: Request):
    """Create a Crossmint order for a fiat deposit."""
    client = get_crossmint_client(request)

    # The key is checked before the body is read
    try:
        client.settings.require_api_key()
    except ConfigurationError as e:
        logger.error(f"Order creation refused: {e}")
        return JSONResponse({"error": str(e)}, status_code=500)

    try:
        data = await request.json()
    except ValueError as e:
        logger.warning(f"Order request body is not JSON: {e}")
        return JSONResponse(
            {"error": constants.ERROR_ORDER_UNEXPECTED, "details": str(e)},
            status_code=500,
        )

    try:
        order_request = CreateOrderRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))

    try:
        upstream = await client.create_order(order_request)
    except ConfigurationError as e:
        logger.error(f"Order creation refused: {e}")
        return JSONResponse({"error": str(e)}, status_code=500)
    except Exception as e:
        logger.exception("Unexpected error creating order")
        return JSONResponse(
            {"error": constants.ERROR_ORDER_UNEXPECTED, "details": str(e)},
            status_code=500,
        )

    if not upstream.ok:
        body = upstream.body
        error = body.get("error") if isinstance(body, dict) else None
        return JSONResponse(
            {"error": error or constants.ERROR_ORDER_FAILED, "details": body},
            status_code=upstream.status_code,
        )

    return JSONResponse(upstream.body, status_code=200)
