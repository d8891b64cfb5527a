"""
Nisab Engine — minimum-wealth thresholds from gold and silver prices.

The threshold is the value of a fixed weight of metal:
- gold:   87.48 g x gold price per gram
- silver: 612.36 g x silver price per gram

Prices come from the caller (a price feed owned elsewhere). Thresholds are
kept as exact Decimal products, so they scale linearly with price and
compare exactly against wealth; rounding happens only for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from loguru import logger

from mizan.core.exceptions import InvalidInputError

from .money import multiply, normalize_currency, round_money, to_decimal

# === Nisab Weight Constants ===

GOLD_NISAB_GRAMS = Decimal("87.48")  # ~3 troy ounces
SILVER_NISAB_GRAMS = Decimal("612.36")  # ~21 troy ounces


class NisabStandard(Enum):
    """Which metal sets the threshold.

    LOWER takes whichever threshold is smaller, which is the cautious
    choice: more people owe zakat under it.
    """

    GOLD = "gold"
    SILVER = "silver"
    LOWER = "lower"


def _positive(value, name: str) -> Decimal:
    amount = to_decimal(value, name)
    if amount <= 0:
        raise InvalidInputError(f"{name} must be positive, got {amount}")
    return amount


@dataclass(frozen=True)
class NisabSnapshot:
    """Nisab thresholds for one price pair in one currency."""

    gold_price_per_gram: Decimal
    silver_price_per_gram: Decimal
    gold_based_threshold: Decimal
    silver_based_threshold: Decimal
    currency: str
    as_of_date: date
    gold_grams: Decimal = GOLD_NISAB_GRAMS
    silver_grams: Decimal = SILVER_NISAB_GRAMS

    def threshold(self, standard: NisabStandard = NisabStandard.LOWER) -> Decimal:
        """Threshold under the requested standard."""
        match standard:
            case NisabStandard.GOLD:
                return self.gold_based_threshold
            case NisabStandard.SILVER:
                return self.silver_based_threshold
            case NisabStandard.LOWER:
                return min(self.gold_based_threshold, self.silver_based_threshold)
            case _:
                raise InvalidInputError(f"Unknown nisab standard: {standard!r}")

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "as_of_date": self.as_of_date.isoformat(),
            "currency": self.currency,
            "gold": {
                "grams": str(self.gold_grams),
                "price_per_gram": str(self.gold_price_per_gram),
                "threshold": str(round_money(self.gold_based_threshold, self.currency)),
            },
            "silver": {
                "grams": str(self.silver_grams),
                "price_per_gram": str(self.silver_price_per_gram),
                "threshold": str(round_money(self.silver_based_threshold, self.currency)),
            },
        }


def compute_nisab(
    gold_price_per_gram,
    silver_price_per_gram,
    currency: str,
    as_of_date: date | None = None,
    gold_grams: Decimal = GOLD_NISAB_GRAMS,
    silver_grams: Decimal = SILVER_NISAB_GRAMS,
) -> NisabSnapshot:
    """Compute gold- and silver-based Nisab thresholds.

    Args:
        gold_price_per_gram: Spot gold price per gram in ``currency``.
        silver_price_per_gram: Spot silver price per gram in ``currency``.
        currency: Three-letter currency code.
        as_of_date: Price date; defaults to today.
        gold_grams: Gold weight standard.
        silver_grams: Silver weight standard.

    Raises:
        InvalidInputError: For non-positive or non-finite prices or weights,
            or a malformed currency code.
    """
    gold_price = _positive(gold_price_per_gram, "gold_price_per_gram")
    silver_price = _positive(silver_price_per_gram, "silver_price_per_gram")
    gold_weight = _positive(gold_grams, "gold_grams")
    silver_weight = _positive(silver_grams, "silver_grams")
    code = normalize_currency(currency)

    snapshot = NisabSnapshot(
        gold_price_per_gram=gold_price,
        silver_price_per_gram=silver_price,
        gold_based_threshold=multiply(gold_weight, gold_price),
        silver_based_threshold=multiply(silver_weight, silver_price),
        currency=code,
        as_of_date=as_of_date or date.today(),
        gold_grams=gold_weight,
        silver_grams=silver_weight,
    )

    logger.debug(
        f"Nisab {code}: gold {gold_weight}g @ {gold_price} = {snapshot.gold_based_threshold}, "
        f"silver {silver_weight}g @ {silver_price} = {snapshot.silver_based_threshold}"
    )
    return snapshot


def convert_nisab(snapshot: NisabSnapshot, rate, to_currency: str) -> NisabSnapshot:
    """Re-express a snapshot in another currency.

    Args:
        snapshot: Snapshot in its source currency.
        rate: Units of ``to_currency`` per unit of ``snapshot.currency``.
        to_currency: Target currency code.
    """
    code = normalize_currency(to_currency)
    if code == snapshot.currency:
        return snapshot

    fx = _positive(rate, "rate")
    return compute_nisab(
        multiply(snapshot.gold_price_per_gram, fx),
        multiply(snapshot.silver_price_per_gram, fx),
        code,
        as_of_date=snapshot.as_of_date,
        gold_grams=snapshot.gold_grams,
        silver_grams=snapshot.silver_grams,
    )
