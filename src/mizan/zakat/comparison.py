"""Year-over-year Zakat comparison and payment history helpers.

Per-year aggregates are produced by the ledger owner; this module only
orders them for charting and derives the figures a yearly report needs.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .eligibility import ZAKAT_RATE, calculate_zakat
from .hijri_calendar import HijriDate, gregorian_to_hijri
from .money import ZERO, to_decimal


@dataclass(frozen=True)
class YearlyComparisonEntry:
    """Savings against Nisab for one Gregorian year."""

    year: int
    hijri_year: int
    savings: Decimal
    nisab_threshold: Decimal
    zakat_paid: Decimal
    zakat_due: Decimal

    def __post_init__(self):
        for field_name in ["savings", "nisab_threshold", "zakat_paid", "zakat_due"]:
            object.__setattr__(self, field_name, to_decimal(getattr(self, field_name), field_name))


@dataclass(frozen=True)
class ZakatPayment:
    """A recorded zakat payment."""

    amount: Decimal
    paid_date: date
    notes: str = ""

    def __post_init__(self):
        object.__setattr__(self, "amount", to_decimal(self.amount, "amount"))

    @property
    def paid_date_hijri(self) -> HijriDate:
        return gregorian_to_hijri(self.paid_date)


def chronological(entries: Iterable[YearlyComparisonEntry]) -> list[YearlyComparisonEntry]:
    """Entries ordered oldest to newest. Empty input gives an empty list."""
    return sorted(entries, key=lambda entry: entry.year)


def build_yearly_entry(
    year: int,
    savings,
    nisab_threshold,
    zakat_paid,
    currency: str,
    rate: Decimal = ZAKAT_RATE,
) -> YearlyComparisonEntry:
    """Assemble one year's entry.

    The Hijri year is the one in progress on 1 January; zakat due is the
    rate applied to savings that reach the threshold, and zero otherwise
    (including for a year with negative savings).
    """
    savings = to_decimal(savings, "savings")
    threshold = to_decimal(nisab_threshold, "nisab_threshold")
    due = calculate_zakat(savings, currency, rate) if savings >= threshold and savings > 0 else ZERO

    return YearlyComparisonEntry(
        year=year,
        hijri_year=gregorian_to_hijri(date(year, 1, 1)).year,
        savings=savings,
        nisab_threshold=threshold,
        zakat_paid=zakat_paid,
        zakat_due=due,
    )


def payments_by_year(payments: Iterable[ZakatPayment]) -> dict[int, Decimal]:
    """Total paid per Gregorian year, keyed in ascending year order."""
    totals: dict[int, Decimal] = defaultdict(lambda: ZERO)
    for payment in payments:
        totals[payment.paid_date.year] += payment.amount
    return dict(sorted(totals.items()))


def annotate_hijri(payments: Iterable[ZakatPayment]) -> list[dict]:
    """Payment history, newest first, with the Hijri paid date in storage form."""
    return [
        {
            "amount": payment.amount,
            "paid_date": payment.paid_date.isoformat(),
            "paid_date_hijri": payment.paid_date_hijri.isoformat(),
            "notes": payment.notes,
        }
        for payment in sorted(payments, key=lambda p: p.paid_date, reverse=True)
    ]


def total_zakat_paid(payments: Iterable[ZakatPayment]) -> Decimal:
    return sum((payment.amount for payment in payments), ZERO)
