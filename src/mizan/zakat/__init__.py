"""Zakat engine — Hijri calendar, Nisab, Hawl and eligibility."""

from .comparison import YearlyComparisonEntry, ZakatPayment, build_yearly_entry, chronological
from .eligibility import ZAKAT_RATE, ZakatEligibilityEvaluator, ZakatEligibilityResult, calculate_zakat
from .hawl import (
    AnchorAdvanced,
    Due,
    HawlState,
    NoAnchor,
    Pending,
    advance_anchor,
    build_hawl_state,
    days_until,
    hawl_window,
    is_hawl_complete,
    next_due_date,
    track_hawl,
)
from .hijri_calendar import (
    DualDate,
    HijriDate,
    HolidayInfo,
    format_gregorian_date,
    format_hijri_date,
    get_days_in_hijri_month,
    get_hijri_month_name,
    gregorian_to_hijri,
    hijri_to_gregorian,
    is_islamic_holiday,
)
from .nisab import GOLD_NISAB_GRAMS, SILVER_NISAB_GRAMS, NisabSnapshot, NisabStandard, compute_nisab
from .reminders import ZakatReminder, check_reminder
from .wealth import WealthBreakdown, current_savings, savings_in_window

__all__ = [
    "GOLD_NISAB_GRAMS",
    "SILVER_NISAB_GRAMS",
    "ZAKAT_RATE",
    "AnchorAdvanced",
    "DualDate",
    "Due",
    "HawlState",
    "HijriDate",
    "HolidayInfo",
    "NisabSnapshot",
    "NisabStandard",
    "NoAnchor",
    "Pending",
    "WealthBreakdown",
    "YearlyComparisonEntry",
    "ZakatEligibilityEvaluator",
    "ZakatEligibilityResult",
    "ZakatPayment",
    "ZakatReminder",
    "advance_anchor",
    "build_hawl_state",
    "build_yearly_entry",
    "calculate_zakat",
    "check_reminder",
    "chronological",
    "compute_nisab",
    "current_savings",
    "days_until",
    "format_gregorian_date",
    "format_hijri_date",
    "get_days_in_hijri_month",
    "get_hijri_month_name",
    "gregorian_to_hijri",
    "hawl_window",
    "hijri_to_gregorian",
    "is_hawl_complete",
    "is_islamic_holiday",
    "next_due_date",
    "savings_in_window",
    "track_hawl",
]
