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
Crossmint Order Models

Pydantic models for the order objects exchanged between the checkout client,
the order proxy and the Crossmint orders API.

Field names are camelCase on the wire and snake_case in Python. Provider
fields that are not modelled here are kept on the model (extra="allow") so a
relayed order is never truncated.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderPhase(str, Enum):
    """Lifecycle stages reported by Crossmint for an order."""
    QUOTE = "quote"
    PAYMENT = "payment"
    DELIVERY = "delivery"
    COMPLETED = "completed"


class CrossmintModel(BaseModel):
    """Base model with camelCase aliases."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CreateOrderRequest(CrossmintModel):
    """Body of POST /api/create-order. Immutable once submitted."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    amount: str = Field(..., description="Fiat amount in the checkout's base currency")
    receipt_email: str = Field(..., description="Where the payment receipt is sent")
    wallet_address: str = Field(..., description="Destination wallet for the tokens")


class ExecutionParameters(CrossmintModel):
    mode: str
    amount: str


class Quote(CrossmintModel):
    """Price quote attached to a line item once Crossmint has priced it."""
    input_amount: Optional[float] = None
    output_amount: Optional[float] = None
    fee_amount: Optional[float] = None
    total_amount: Optional[float] = None


class LineItem(CrossmintModel):
    token_locator: str
    execution_parameters: ExecutionParameters
    quote: Optional[Quote] = None


class Recipient(CrossmintModel):
    wallet_address: str


class Payment(CrossmintModel):
    method: str
    receipt_email: Optional[str] = None


class Order(CrossmintModel):
    """Order record as returned (and later pushed) by Crossmint."""
    order_id: str
    line_items: List[LineItem] = Field(default_factory=list)
    recipient: Optional[Recipient] = None
    payment: Optional[Payment] = None
    phase: str = ""

    @property
    def quote(self) -> Optional[Quote]:
        """Quote of the first line item, if Crossmint has produced one."""
        if not self.line_items:
            return None
        return self.line_items[0].quote


class CreateOrderResponse(CrossmintModel):
    """Successful response of the order proxy (Crossmint's body, unchanged)."""
    order: Order
    client_secret: str
