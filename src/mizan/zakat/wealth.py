"""Zakatable wealth aggregation.

Turns ledger aggregates supplied by the caller into the single wealth
figure the evaluator consumes. Sums are Decimal so long ledgers do not
accumulate float drift.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from mizan.core.exceptions import InvalidDateError

from .money import ZERO, to_decimal


def _sum(amounts: Iterable, name: str) -> Decimal:
    return sum((to_decimal(a, name) for a in amounts), ZERO)


@dataclass(frozen=True)
class WealthBreakdown:
    """Components of zakatable wealth.

    Attributes:
        cash: Savings held as cash or bank balances.
        zakatable_income: Income entries flagged as zakatable.
        investments: Market value of zakatable investments.
        debts: Debts due, deducted from the total.
    """

    cash: Decimal = ZERO
    zakatable_income: Decimal = ZERO
    investments: Decimal = ZERO
    debts: Decimal = ZERO

    def __post_init__(self):
        for field_name in ["cash", "zakatable_income", "investments", "debts"]:
            object.__setattr__(self, field_name, to_decimal(getattr(self, field_name), field_name))

    @property
    def total(self) -> Decimal:
        """cash + zakatable income + investments - debts. May be negative."""
        return self.cash + self.zakatable_income + self.investments - self.debts


def current_savings(
    incomes: Iterable,
    expenses: Iterable,
    zakat_paid: Iterable = (),
) -> Decimal:
    """Income minus expenses minus zakat already paid."""
    return _sum(incomes, "income") - _sum(expenses, "expense") - _sum(zakat_paid, "zakat_paid")


def _sum_between(entries: Iterable[tuple[date, object]], start: date, end: date, name: str) -> Decimal:
    return _sum((amount for when, amount in entries if start <= when <= end), name)


def savings_in_window(
    incomes: Iterable[tuple[date, object]],
    expenses: Iterable[tuple[date, object]],
    start: date,
    end: date,
) -> Decimal:
    """Income minus expenses dated within ``start``..``end`` inclusive.

    Entries are ``(date, amount)`` pairs; pair with ``hawl_window`` to get
    the savings accumulated over one Hawl.

    Raises:
        InvalidDateError: If ``end`` precedes ``start``.
    """
    if end < start:
        raise InvalidDateError(f"Window end {end.isoformat()} precedes start {start.isoformat()}")
    return _sum_between(incomes, start, end, "income") - _sum_between(expenses, start, end, "expense")
