"""Tests for mizan.zakat.nisab."""

from datetime import date
from decimal import Decimal

import pytest

from mizan.core.exceptions import InvalidInputError
from mizan.zakat.nisab import (
    GOLD_NISAB_GRAMS,
    SILVER_NISAB_GRAMS,
    NisabStandard,
    compute_nisab,
    convert_nisab,
)


class TestComputeNisab:
    def test_thresholds(self, usd_nisab):
        assert usd_nisab.gold_based_threshold == Decimal("5686.20")  # 87.48 * 65
        assert usd_nisab.silver_based_threshold == Decimal("520.5060")  # 612.36 * 0.85
        assert usd_nisab.currency == "USD"
        assert usd_nisab.as_of_date == date(2025, 3, 15)

    def test_weight_constants(self):
        assert GOLD_NISAB_GRAMS == Decimal("87.48")
        assert SILVER_NISAB_GRAMS == Decimal("612.36")

    def test_doubling_price_doubles_threshold(self):
        base = compute_nisab("71.37", "0.93", "USD")
        doubled = compute_nisab(Decimal("71.37") * 2, "0.93", "USD")
        assert doubled.gold_based_threshold == base.gold_based_threshold * 2
        assert doubled.silver_based_threshold == base.silver_based_threshold

    def test_float_prices_are_taken_at_face_value(self):
        snapshot = compute_nisab(0.1, 0.1, "USD")
        assert snapshot.gold_price_per_gram == Decimal("0.1")
        assert snapshot.gold_based_threshold == Decimal("8.748")

    def test_custom_weights(self):
        snapshot = compute_nisab(100, 1, "usd", gold_grams=Decimal("85"), silver_grams=Decimal("595"))
        assert snapshot.gold_based_threshold == Decimal("8500")
        assert snapshot.silver_based_threshold == Decimal("595")
        assert snapshot.currency == "USD"

    def test_defaults_to_today(self):
        assert compute_nisab(65, 1, "USD").as_of_date == date.today()

    @pytest.mark.parametrize("gold,silver", [(0, 1), (1, 0), (-65, 1), (1, -0.5)])
    def test_non_positive_prices(self, gold, silver):
        with pytest.raises(InvalidInputError, match="positive"):
            compute_nisab(gold, silver, "USD")

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), "Infinity", "NaN", "sixty"])
    def test_non_finite_prices(self, bad):
        with pytest.raises(InvalidInputError):
            compute_nisab(bad, 1, "USD")

    @pytest.mark.parametrize("currency", ["US", "USDT", "U$D", "", "١٢٣"])
    def test_bad_currency(self, currency):
        with pytest.raises(InvalidInputError, match="currency"):
            compute_nisab(65, 1, currency)


class TestThreshold:
    def test_standards(self, usd_nisab):
        assert usd_nisab.threshold(NisabStandard.GOLD) == Decimal("5686.20")
        assert usd_nisab.threshold(NisabStandard.SILVER) == Decimal("520.5060")
        assert usd_nisab.threshold(NisabStandard.LOWER) == Decimal("520.5060")

    def test_default_is_lower(self, usd_nisab):
        assert usd_nisab.threshold() == usd_nisab.silver_based_threshold

    def test_lower_picks_gold_when_cheaper(self):
        snapshot = compute_nisab(1, 10, "USD")
        assert snapshot.threshold(NisabStandard.LOWER) == snapshot.gold_based_threshold

    def test_to_dict_rounds_for_display(self, usd_nisab):
        d = usd_nisab.to_dict()
        assert d["gold"]["threshold"] == "5686.20"
        assert d["silver"]["threshold"] == "520.51"
        assert d["as_of_date"] == "2025-03-15"


class TestConvertNisab:
    def test_rescales_by_rate(self, usd_nisab):
        eur = convert_nisab(usd_nisab, Decimal("0.92"), "EUR")
        assert eur.currency == "EUR"
        assert eur.gold_price_per_gram == Decimal("59.80")
        assert eur.gold_based_threshold == usd_nisab.gold_based_threshold * Decimal("0.92")
        assert eur.as_of_date == usd_nisab.as_of_date

    def test_same_currency_is_identity(self, usd_nisab):
        assert convert_nisab(usd_nisab, 3, "usd") is usd_nisab

    def test_rate_must_be_positive(self, usd_nisab):
        with pytest.raises(InvalidInputError):
            convert_nisab(usd_nisab, 0, "EUR")
