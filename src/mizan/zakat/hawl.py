"""
Hawl Tracker — one-lunar-year holding period.

Zakat falls due once wealth has stayed at or above Nisab for a full Hijri
year (the Hawl) counted from an anchor date the user picks. Hijri years are
354 or 355 days long, so elapsed time is measured in days, never by
subtracting year numbers.

Lifecycle of an anchor:

    NoAnchor -> Pending(anchor, due_date) -> Due(anchor, due_date)
                                                 |
                        advance_anchor() <-------+  (explicit payment only)

Pending becomes Due purely because the current date reaches the due date.
Moving the anchor forward happens only through ``advance_anchor``, so a
missed obligation stays visible until the user records it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from loguru import logger

from mizan.core.exceptions import InvalidInputError

from .hijri_calendar import HijriDate, gregorian_to_hijri
from .money import to_decimal


@dataclass(frozen=True)
class NoAnchor:
    """No anchor date recorded yet."""


@dataclass(frozen=True)
class Pending:
    """Anchor set, Hawl still running."""

    anchor: HijriDate
    due_date: HijriDate


@dataclass(frozen=True)
class Due:
    """A full Hawl has elapsed since the anchor."""

    anchor: HijriDate
    due_date: HijriDate


HawlStatus = NoAnchor | Pending | Due


@dataclass(frozen=True)
class AnchorAdvanced:
    """Outcome of recording a payment: the anchor rolls to the due date."""

    previous_anchor: HijriDate
    anchor: HijriDate


@dataclass(frozen=True)
class HawlState:
    """Derived view of an anchor at a given date. Never persisted.

    Completion is read off ``status``. The anchor and due date must agree
    with it.
    """

    anchor_date: HijriDate | None = None
    next_due_date_hijri: HijriDate | None = None
    next_due_date_gregorian: date | None = None
    days_until_due: int | None = None
    status: HawlStatus = field(default_factory=NoAnchor)

    def __post_init__(self):
        if isinstance(self.status, NoAnchor):
            expected = (None, None)
        else:
            expected = (self.status.anchor, self.status.due_date)
        if (self.anchor_date, self.next_due_date_hijri) != expected:
            raise InvalidInputError(
                f"Hawl state disagrees with its status {type(self.status).__name__}: "
                f"anchor {self.anchor_date}, due {self.next_due_date_hijri}"
            )

    @property
    def hawl_complete(self) -> bool:
        return isinstance(self.status, Due)


def anniversary(anchor: HijriDate) -> HijriDate:
    """Same month and day one Hijri year later, day clamped to the month length."""
    return HijriDate.clamped(anchor.year + 1, anchor.month, anchor.day)


def hawl_length_days(anchor: HijriDate) -> int:
    """Days in the Hawl starting at ``anchor`` (354 or 355)."""
    return anniversary(anchor).day_number() - anchor.day_number()


def is_hawl_complete(anchor: HijriDate, current: HijriDate) -> bool:
    """True once at least one full Hawl of days has elapsed since ``anchor``."""
    elapsed = current.day_number() - anchor.day_number()
    return elapsed >= hawl_length_days(anchor)


def next_due_date(anchor: HijriDate, current: HijriDate | None = None) -> HijriDate:
    """Anchor advanced by exactly one Hawl.

    The result does not roll forward past ``current``; an overdue date is
    returned as-is so the caller can see it.

    Raises:
        InvalidInputError: If ``current`` precedes the anchor.
    """
    if current is not None and current < anchor:
        raise InvalidInputError(f"Anchor {anchor.isoformat()} is after the current date {current.isoformat()}")
    return anniversary(anchor)


def days_until(target: HijriDate, current: HijriDate) -> int:
    """Days from ``current`` to ``target``; negative when the target has passed."""
    return target.day_number() - current.day_number()


def track_hawl(anchor: HijriDate | None, current: HijriDate) -> HawlStatus:
    """Classify an anchor against the current date."""
    if anchor is None:
        return NoAnchor()

    due_date = next_due_date(anchor, current)
    complete = is_hawl_complete(anchor, current)
    logger.debug(f"Hawl {anchor.isoformat()} -> {due_date.isoformat()} at {current.isoformat()}: complete={complete}")

    if complete:
        return Due(anchor=anchor, due_date=due_date)
    return Pending(anchor=anchor, due_date=due_date)


def build_hawl_state(anchor: HijriDate | None, today: date | None = None) -> HawlState:
    """Derive the full Hawl state for ``anchor`` as of a Gregorian ``today``."""
    current = gregorian_to_hijri(today or date.today())
    status = track_hawl(anchor, current)

    if isinstance(status, NoAnchor):
        return HawlState(status=status)

    return HawlState(
        anchor_date=status.anchor,
        next_due_date_hijri=status.due_date,
        next_due_date_gregorian=status.due_date.to_gregorian(),
        days_until_due=days_until(status.due_date, current),
        status=status,
    )


def hawl_window(anchor: HijriDate | None, today: date | None = None) -> tuple[date, date]:
    """Gregorian bounds of the Hawl ending at ``anchor``, both inclusive.

    The window runs from the same Hijri date one year earlier (clamped to
    the month length) up to ``anchor``. Without an anchor it ends at
    today's Hijri date.

    Raises:
        InvalidDateError: When the window would start before 1 AH.
    """
    end = anchor if anchor is not None else gregorian_to_hijri(today or date.today())
    start = HijriDate.clamped(end.year - 1, end.month, end.day)
    return start.to_gregorian(), end.to_gregorian()


def advance_anchor(status: HawlStatus) -> AnchorAdvanced:
    """Roll the anchor to its due date after the user records a payment.

    Raises:
        InvalidInputError: Unless ``status`` is Due.
    """
    if not isinstance(status, Due):
        raise InvalidInputError(f"Only a due Hawl can be advanced, got {type(status).__name__}")

    logger.info(f"Hawl anchor advanced {status.anchor.isoformat()} -> {status.due_date.isoformat()}")
    return AnchorAdvanced(previous_anchor=status.anchor, anchor=status.due_date)


def anchor_after_dips(
    balances: Iterable[tuple[HijriDate, Decimal]],
    threshold,
) -> HijriDate | None:
    """Find where the current unbroken run at or above Nisab began.

    Any balance below ``threshold`` restarts the Hawl, so the anchor is the
    first date of the final run of balances at or above it.

    Args:
        balances: (date, balance) observations in any order.
        threshold: Nisab threshold in the balances' currency.

    Returns:
        The anchor date, or None when there are no observations or the most
        recent balance is below the threshold.
    """
    limit = to_decimal(threshold, "threshold")
    run_start: HijriDate | None = None

    for when, balance in sorted(balances, key=lambda item: item[0]):
        if to_decimal(balance, "balance") >= limit:
            if run_start is None:
                run_start = when
        else:
            run_start = None

    return run_start
