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
Order Update Channel

The embedded checkout pushes the latest order object whenever Crossmint
reports a change (new quote, phase change). Those updates arrive
independently of the request that created the order, so they are delivered
through this channel to whoever subscribed.
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from backend.orders import Order

logger = logging.getLogger(__name__)

OrderListener = Callable[[Order], None]


class OrderEventChannel:
    """In-process fan-out of provider-pushed order updates."""

    def __init__(self):
        self._listeners: List[OrderListener] = []
        self.latest: Optional[Order] = None

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, order: Order) -> None:
        """Deliver an order update to every listener."""
        self.latest = order
        for listener in list(self._listeners):
            try:
                listener(order)
            except Exception:
                logger.exception(f"Order listener failed for order {order.order_id}")

    def publish_raw(self, data: Dict[str, Any]) -> Order:
        """Validate a raw order payload (camelCase) and publish it."""
        order = Order.model_validate(data)
        self.publish(order)
        return order
