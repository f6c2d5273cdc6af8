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
Deposit Cost Breakdown

Summarises what the buyer pays and receives. Before Crossmint has priced the
order only the entered amount is known; once a quote arrives the fee, total
and token output come from the quote.
"""

from decimal import Decimal
from typing import List, Optional, Tuple
from pydantic import BaseModel

from backend.orders import Quote


def _to_decimal(value: Optional[float]) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(str(value))


class AmountBreakdown(BaseModel):
    """Cost summary shown while the buyer picks an amount."""
    input_amount: Decimal
    fee_amount: Optional[Decimal] = None
    total_amount: Decimal
    output_amount: Optional[Decimal] = None
    is_amount_valid: bool = True
    is_quoted: bool = False

    @classmethod
    def from_quote(
        cls,
        quote: Optional[Quote],
        input_amount: Decimal,
        is_amount_valid: bool = True,
    ) -> "AmountBreakdown":
        """
        Build the breakdown from the latest quote.

        Args:
            quote: Quote of the first line item, or None if not priced yet
            input_amount: Amount entered by the buyer (0 when empty)
            is_amount_valid: Result of the amount check

        Returns:
            AmountBreakdown
        """
        if quote is None:
            return cls(
                input_amount=input_amount,
                total_amount=input_amount,
                is_amount_valid=is_amount_valid,
            )

        quoted_input = _to_decimal(quote.input_amount)
        total = _to_decimal(quote.total_amount)
        return cls(
            input_amount=quoted_input if quoted_input is not None else input_amount,
            fee_amount=_to_decimal(quote.fee_amount),
            total_amount=total if total is not None else input_amount,
            output_amount=_to_decimal(quote.output_amount),
            is_amount_valid=is_amount_valid,
            is_quoted=True,
        )

    def rows(self) -> List[Tuple[str, str]]:
        """Label/value pairs for display."""
        rows = [("Amount", f"${self.input_amount:.2f}")]
        if self.fee_amount is not None:
            rows.append(("Fees", f"${self.fee_amount:.2f}"))
        rows.append(("Total", f"${self.total_amount:.2f}"))
        if self.output_amount is not None:
            rows.append(("You receive", f"{self.output_amount} USDC"))
        return rows
