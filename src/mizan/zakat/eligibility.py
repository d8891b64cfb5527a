"""
Zakat Eligibility — the obligation verdict and amount due.

Zakat is obligatory when both hold:
- zakatable wealth is at or above the Nisab threshold (inclusive), and
- a full Hawl has elapsed since the anchor date.

The amount due is 2.5% of zakatable wealth, rounded half-up to the
currency's minor unit. Wealth below Nisab is not an error: it marks the
holder as eligible to receive zakat rather than to pay it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from loguru import logger

from mizan.core.exceptions import InvalidInputError

from .hawl import HawlState, build_hawl_state
from .hijri_calendar import HijriDate
from .money import ZERO, multiply, round_money, to_decimal
from .nisab import NisabSnapshot, NisabStandard

ZAKAT_RATE = Decimal("0.025")


def calculate_zakat(zakatable_wealth, currency: str, rate: Decimal = ZAKAT_RATE) -> Decimal:
    """Zakat on ``zakatable_wealth`` at ``rate``, rounded to the minor unit.

    Raises:
        InvalidInputError: For negative or non-finite wealth, or wealth too
            large to round exactly.
    """
    wealth = to_decimal(zakatable_wealth, "zakatable_wealth")
    if wealth < 0:
        raise InvalidInputError(f"zakatable_wealth cannot be negative, got {wealth}")
    return round_money(multiply(wealth, to_decimal(rate, "rate")), currency)


@dataclass(frozen=True)
class ZakatEligibilityResult:
    """Complete result of an eligibility evaluation."""

    annual_savings: Decimal
    nisab_threshold: Decimal
    nisab_standard: NisabStandard
    currency: str
    is_obligatory: bool
    meets_nisab: bool
    eligible_to_receive: bool
    zakat_amount_due: Decimal
    amount_to_reach_nisab: Decimal
    hawl_complete: bool
    next_zakat_date_hijri: HijriDate | None = None
    next_zakat_date_gregorian: date | None = None
    days_until_zakat_date: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "currency": self.currency,
            "nisab": {
                "standard": self.nisab_standard.value,
                "threshold": str(round_money(self.nisab_threshold, self.currency)),
                "meets_nisab": self.meets_nisab,
                "amount_to_reach": str(round_money(self.amount_to_reach_nisab, self.currency)),
            },
            "zakat": {
                "annual_savings": str(self.annual_savings),
                "is_obligatory": self.is_obligatory,
                "eligible_to_receive": self.eligible_to_receive,
                "amount_due": str(self.zakat_amount_due),
            },
            "hawl": {
                "complete": self.hawl_complete,
                "next_date_hijri": self.next_zakat_date_hijri.isoformat() if self.next_zakat_date_hijri else None,
                "next_date_gregorian": (
                    self.next_zakat_date_gregorian.isoformat() if self.next_zakat_date_gregorian else None
                ),
                "days_until": self.days_until_zakat_date,
            },
        }


class ZakatEligibilityEvaluator:
    """Combines wealth, Nisab and Hawl into an eligibility verdict.

    The Nisab standard defaults to LOWER; pass GOLD or SILVER to the
    constructor or per call to override it.
    """

    def __init__(
        self,
        standard: NisabStandard = NisabStandard.LOWER,
        rate: Decimal = ZAKAT_RATE,
    ):
        self.standard = standard
        self.rate = to_decimal(rate, "rate")
        if not 0 < self.rate <= 1:
            raise InvalidInputError(f"Zakat rate must be in (0, 1], got {self.rate}")

    @classmethod
    def from_config(cls, config) -> ZakatEligibilityEvaluator:
        """Build from a ``mizan.core.config.Config``."""
        settings = config.validated().zakat
        return cls(standard=settings.nisab_standard, rate=settings.rate)

    def evaluate(
        self,
        zakatable_wealth,
        nisab: NisabSnapshot,
        hawl: HawlState,
        standard: NisabStandard | None = None,
    ) -> ZakatEligibilityResult:
        """Evaluate obligation and amount due.

        Raises:
            InvalidInputError: For negative or non-finite wealth.
        """
        wealth = to_decimal(zakatable_wealth, "zakatable_wealth")
        if wealth < 0:
            raise InvalidInputError(f"zakatable_wealth cannot be negative, got {wealth}")

        chosen = standard or self.standard
        threshold = nisab.threshold(chosen)
        meets_nisab = wealth >= threshold
        is_obligatory = meets_nisab and hawl.hawl_complete

        logger.debug(
            f"Nisab check: {wealth} vs {chosen.value} threshold {threshold} {nisab.currency}, "
            f"hawl complete={hawl.hawl_complete}"
        )

        zakat_due = calculate_zakat(wealth, nisab.currency, self.rate) if is_obligatory else ZERO
        if not meets_nisab:
            logger.info(f"Wealth {wealth} below nisab {threshold} {nisab.currency}, eligible to receive zakat")

        return ZakatEligibilityResult(
            annual_savings=wealth,
            nisab_threshold=threshold,
            nisab_standard=chosen,
            currency=nisab.currency,
            is_obligatory=is_obligatory,
            meets_nisab=meets_nisab,
            eligible_to_receive=not meets_nisab,
            zakat_amount_due=zakat_due,
            amount_to_reach_nisab=ZERO if meets_nisab else threshold - wealth,
            hawl_complete=hawl.hawl_complete,
            next_zakat_date_hijri=hawl.next_due_date_hijri,
            next_zakat_date_gregorian=hawl.next_due_date_gregorian,
            days_until_zakat_date=hawl.days_until_due,
        )

    def evaluate_from_anchor(
        self,
        zakatable_wealth,
        nisab: NisabSnapshot,
        anchor: HijriDate | None,
        today: date | None = None,
        standard: NisabStandard | None = None,
    ) -> ZakatEligibilityResult:
        """Derive the Hawl state from a stored anchor and evaluate."""
        return self.evaluate(zakatable_wealth, nisab, build_hawl_state(anchor, today), standard)
