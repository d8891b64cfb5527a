"""Tests for mizan.zakat.money."""

from decimal import Decimal

import pytest

from mizan.core.exceptions import InvalidInputError
from mizan.zakat.money import MAX_MONEY_DIGITS, minor_unit, multiply, normalize_currency, round_money, to_decimal


class TestToDecimal:
    def test_accepts_common_types(self):
        assert to_decimal(5) == Decimal("5")
        assert to_decimal("12.50") == Decimal("12.50")
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(Decimal("3.3")) == Decimal("3.3")

    @pytest.mark.parametrize("bad", [True, None, [1], "1,000", float("nan"), Decimal("Infinity")])
    def test_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            to_decimal(bad, "amount")

    def test_error_names_the_field(self):
        with pytest.raises(InvalidInputError, match="wealth"):
            to_decimal("abc", "wealth")


class TestRounding:
    def test_half_up(self):
        assert round_money(Decimal("3086.4195"), "USD") == Decimal("3086.42")
        assert round_money(Decimal("0.125"), "USD") == Decimal("0.13")
        assert round_money(Decimal("0.005"), "EUR") == Decimal("0.01")

    def test_minor_units(self):
        assert minor_unit("USD") == 2
        assert minor_unit("jpy") == 0
        assert minor_unit("KWD") == 3
        assert round_money(Decimal("1234.5"), "JPY") == Decimal("1235")
        assert round_money(Decimal("1.2345"), "KWD") == Decimal("1.235")

    def test_normalize_currency(self):
        assert normalize_currency(" sar ") == "SAR"
        with pytest.raises(InvalidInputError):
            normalize_currency(840)


class TestLargeAmounts:
    def test_round_beyond_default_precision(self):
        # 31 significant digits after quantizing, above the default 28
        assert round_money(Decimal("2.5E+28"), "USD") == Decimal("25000000000000000000000000000.00")
        assert round_money(Decimal("1234567890123456789012345678.905"), "USD") == Decimal(
            "1234567890123456789012345678.91"
        )

    def test_multiply_is_exact(self):
        product = multiply(Decimal("12345678901234567890123456789"), Decimal("0.025"))
        assert product == Decimal("308641972530864197253086419.725")

    def test_too_many_digits_rejected(self):
        with pytest.raises(InvalidInputError, match="significant digits"):
            round_money(Decimal("1E+200"), "USD")
        assert MAX_MONEY_DIGITS == 100
