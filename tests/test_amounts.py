from decimal import Decimal

import pytest

from app.amounts import AmountValidator, is_valid_amount, parse_amount


class TestIsValidAmount:

    @pytest.mark.parametrize("amount", ["1", "25", "25.00", "25.5", "10000", " 42.10 "])
    def test_accepts(self, amount):
        assert is_valid_amount(amount)

    @pytest.mark.parametrize("amount", ["", "   ", None, "abc", "0", "0.99", "10000.01", "-5", "25.001", "NaN", "Infinity"])
    def test_rejects(self, amount):
        assert not is_valid_amount(amount)

    def test_custom_range(self):
        assert is_valid_amount("0.50", minimum="0.5", maximum="1")
        assert not is_valid_amount("2", minimum="0.5", maximum="1")


class TestAmountValidator:

    def test_bound_range(self):
        validator = AmountValidator(minimum=5, maximum=50)
        assert validator("5.00")
        assert not validator("4.99")
        assert not validator("50.01")


class TestParseAmount:

    def test_parses_decimal(self):
        assert parse_amount("25.50") == Decimal("25.50")

    @pytest.mark.parametrize("amount", ["", None, "abc", "NaN"])
    def test_falls_back_to_zero(self, amount):
        assert parse_amount(amount) == Decimal("0")
