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
Deposit Order Proxy Package

Server side of the deposit checkout. Forwards order creation requests to
Crossmint with the server-held API key and relays the response verbatim.

- config: Process-wide settings resolved from the environment
- orders: Order request/response models
- crossmint: Client for the Crossmint orders API
- order_routes: POST /api/create-order
- server: FastAPI application factory and runner
"""

from .config import Settings, load_settings
from .crossmint import CrossmintClient, UpstreamResponse
from .exceptions import ConfigurationError
from .orders import CreateOrderRequest, CreateOrderResponse, Order, OrderPhase, Quote

__all__ = [
    "Settings",
    "load_settings",
    "CrossmintClient",
    "UpstreamResponse",
    "ConfigurationError",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "Order",
    "OrderPhase",
    "Quote",
]
