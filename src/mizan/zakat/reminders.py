"""Zakat reminders: flag anchors whose due date is close.

Delivery (push, email, in-app) belongs to the caller; this module only
decides whether a reminder is warranted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from loguru import logger

from mizan.core.exceptions import InvalidInputError

from .hawl import build_hawl_state
from .hijri_calendar import HijriDate

DEFAULT_REMINDER_LEAD_DAYS = 30


@dataclass(frozen=True)
class ZakatReminder:
    """Reminder decision for one anchor."""

    anchor: HijriDate
    due_date_hijri: HijriDate
    due_date_gregorian: date
    days_until: int
    should_send: bool


def check_reminder(
    anchor: HijriDate,
    today: date | None = None,
    lead_days: int = DEFAULT_REMINDER_LEAD_DAYS,
) -> ZakatReminder:
    """Decide whether to remind about the Hawl that started at ``anchor``.

    A reminder is due when the due date is between 1 and ``lead_days`` days
    away. Overdue and same-day dates are left to the eligibility result.
    """
    if lead_days < 0:
        raise InvalidInputError(f"lead_days cannot be negative, got {lead_days}")

    state = build_hawl_state(anchor, today)
    should_send = 0 < state.days_until_due <= lead_days
    if should_send:
        logger.debug(f"Reminder due for anchor {anchor.isoformat()}: {state.days_until_due} days left")

    return ZakatReminder(
        anchor=anchor,
        due_date_hijri=state.next_due_date_hijri,
        due_date_gregorian=state.next_due_date_gregorian,
        days_until=state.days_until_due,
        should_send=should_send,
    )
