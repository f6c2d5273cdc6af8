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

"""Deposit amount parsing and validation."""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

DEFAULT_MIN_AMOUNT = Decimal("1")
DEFAULT_MAX_AMOUNT = Decimal("10000")

Number = Union[Decimal, int, str]


def parse_amount(amount: Optional[str]) -> Decimal:
    """Parse a decimal amount string, returning 0 when it is empty or malformed."""
    if not amount:
        return Decimal("0")
    try:
        value = Decimal(amount.strip())
    except InvalidOperation:
        return Decimal("0")
    if not value.is_finite():
        return Decimal("0")
    return value


def is_valid_amount(
    amount: Optional[str],
    minimum: Number = DEFAULT_MIN_AMOUNT,
    maximum: Number = DEFAULT_MAX_AMOUNT,
) -> bool:
    """
    Check a fiat deposit amount.

    The amount must be a plain decimal with at most two fractional digits and
    lie within [minimum, maximum].
    """
    if not amount or not amount.strip():
        return False
    try:
        value = Decimal(amount.strip())
    except InvalidOperation:
        return False
    if not value.is_finite():
        return False
    if value.as_tuple().exponent < -2:
        return False
    return Decimal(minimum) <= value <= Decimal(maximum)


class AmountValidator:
    """Amount check bound to a configured range."""

    def __init__(self, minimum: Number = DEFAULT_MIN_AMOUNT, maximum: Number = DEFAULT_MAX_AMOUNT):
        self.minimum = Decimal(minimum)
        self.maximum = Decimal(maximum)

    def __call__(self, amount: Optional[str]) -> bool:
        return is_valid_amount(amount, self.minimum, self.maximum)
