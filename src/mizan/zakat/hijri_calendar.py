"""
Hijri Calendar — tabular Islamic calendar arithmetic.

Implements:
- Gregorian <-> Hijri conversion through Julian day numbers
- Month and year lengths from the 30-year cycle (11 leap years per cycle)
- Canonical month names and a fixed table of Islamic holidays
- Dual-date (Gregorian + Hijri) display values

The tabular convention is used so results are deterministic and need no
ephemeris data: odd months have 30 days, even months 29, and Dhu al-Hijjah
gains a 30th day in leap years where ``(11 * year + 14) % 30 < 11``.
Day 1 of Muharram 1 AH is the civil epoch, Friday 16 July 622 (Julian),
which is 19 July 622 in the proleptic Gregorian calendar of ``datetime.date``.

Invalid components raise InvalidDateError; nothing is clamped or wrapped
except through the explicit ``HijriDate.clamped`` constructor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from mizan.core.exceptions import InvalidDateError, OutOfRangeError

# === Calendar Constants ===

HIJRI_EPOCH_JDN = 1948440  # 1 Muharram 1 AH, civil epoch
GREGORIAN_JDN_OFFSET = 1721425  # JDN = date.toordinal() + offset
CYCLE_YEARS = 30
CYCLE_DAYS = 10631  # 30 * 354 + 11 leap days

HIJRI_MONTH_NAMES = (
    "Muharram",
    "Safar",
    "Rabi' al-awwal",
    "Rabi' al-thani",
    "Jumada al-awwal",
    "Jumada al-thani",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

_GREGORIAN_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# (month, day) -> holiday name
ISLAMIC_HOLIDAYS = {
    (9, 1): "First day of Ramadan",
    (9, 27): "Laylat al-Qadr",
    (10, 1): "Eid al-Fitr",
    (12, 9): "Day of Arafah",
    (12, 10): "Eid al-Adha",
    (1, 10): "Ashura",
}

EXTENDED_ISLAMIC_HOLIDAYS = {
    **ISLAMIC_HOLIDAYS,
    (1, 1): "Islamic New Year",
    (3, 12): "Mawlid al-Nabi",
    (7, 27): "Isra and Mi'raj",
}


def _require_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDateError(f"Hijri {name} must be an integer, got {value!r}")
    return value


def _check_year(year) -> int:
    year = _require_int(year, "year")
    if year < 1:
        raise InvalidDateError(f"Hijri year must be >= 1, got {year}")
    return year


def _check_month(month) -> int:
    month = _require_int(month, "month")
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Hijri month must be in 1..12, got {month}")
    return month


def is_hijri_leap_year(year: int) -> bool:
    """True when Dhu al-Hijjah has 30 days in ``year``."""
    year = _check_year(year)
    return (11 * year + 14) % CYCLE_YEARS < 11


def days_in_hijri_year(year: int) -> int:
    """354 for common years, 355 for leap years."""
    return 355 if is_hijri_leap_year(year) else 354


def get_days_in_hijri_month(year: int, month: int) -> int:
    """Number of days in a Hijri month (29 or 30)."""
    year = _check_year(year)
    month = _check_month(month)
    if month % 2 == 1:
        return 30
    if month == 12 and is_hijri_leap_year(year):
        return 30
    return 29


def _validate(year, month, day) -> None:
    year = _check_year(year)
    month = _check_month(month)
    day = _require_int(day, "day")
    length = get_days_in_hijri_month(year, month)
    if not 1 <= day <= length:
        raise InvalidDateError(
            f"Day {day} is outside {HIJRI_MONTH_NAMES[month - 1]} {year} (1..{length})"
        )


def _month_offset(month: int) -> int:
    """Days in the year before the first of ``month``: ceil(29.5 * (month - 1))."""
    return (59 * (month - 1) + 1) // 2


def _year_start(year: int) -> int:
    """Julian day number of 1 Muharram ``year``."""
    return HIJRI_EPOCH_JDN + (year - 1) * 354 + (3 + 11 * year) // CYCLE_YEARS


def _to_day_number(year: int, month: int, day: int) -> int:
    return _year_start(year) + _month_offset(month) + day - 1


def _from_day_number(jdn: int) -> HijriDate:
    # Cycle estimate, then correct by searching neighbouring year starts
    year = max(1, (CYCLE_YEARS * (jdn - HIJRI_EPOCH_JDN) + 10646) // CYCLE_DAYS)
    while year > 1 and jdn < _year_start(year):
        year -= 1
    while jdn >= _year_start(year + 1):
        year += 1

    day_of_year = jdn - _year_start(year)
    month = 12
    while _month_offset(month) > day_of_year:
        month -= 1

    return HijriDate(year, month, day_of_year - _month_offset(month) + 1)


@dataclass(frozen=True, order=True)
class HijriDate:
    """A validated date in the tabular Hijri calendar.

    Ordering is lexicographic on (year, month, day), which is also
    chronological order.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        _validate(self.year, self.month, self.day)

    @classmethod
    def clamped(cls, year: int, month: int, day: int) -> HijriDate:
        """Build a date, pulling ``day`` back to the last day of a shorter month."""
        length = get_days_in_hijri_month(year, month)
        day = _require_int(day, "day")
        if day < 1:
            raise InvalidDateError(f"Hijri day must be >= 1, got {day}")
        return cls(year, month, min(day, length))

    @classmethod
    def from_gregorian(cls, value: date) -> HijriDate:
        return gregorian_to_hijri(value)

    @classmethod
    def fromisoformat(cls, text: str) -> HijriDate:
        """Parse the ``YYYY-MM-DD`` storage form."""
        parts = text.strip().split("-") if isinstance(text, str) else []
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise InvalidDateError(f"Expected a Hijri date as YYYY-MM-DD, got {text!r}")
        return cls(*(int(p) for p in parts))

    def to_gregorian(self) -> date:
        return hijri_to_gregorian(self.year, self.month, self.day)

    def day_number(self) -> int:
        """Julian day number; differences between two dates are elapsed days."""
        return _to_day_number(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def month_name(self) -> str:
        return HIJRI_MONTH_NAMES[self.month - 1]

    def __str__(self) -> str:
        return format_hijri_date(self)


@dataclass(frozen=True)
class HolidayInfo:
    """Result of a holiday lookup."""

    is_holiday: bool
    name: str | None = None


def gregorian_to_hijri(value: date) -> HijriDate:
    """Convert a Gregorian date to its tabular Hijri equivalent."""
    if not isinstance(value, date):
        raise InvalidDateError(f"Expected a datetime.date, got {type(value).__name__}")
    jdn = value.toordinal() + GREGORIAN_JDN_OFFSET
    if jdn < HIJRI_EPOCH_JDN:
        raise InvalidDateError(f"{value.isoformat()} precedes the Hijri epoch")
    return _from_day_number(jdn)


def hijri_to_gregorian(year: int, month: int, day: int) -> date:
    """Convert a Hijri date to a Gregorian ``date``."""
    _validate(year, month, day)
    ordinal = _to_day_number(year, month, day) - GREGORIAN_JDN_OFFSET
    if ordinal > date.max.toordinal():
        raise InvalidDateError(f"Hijri date {year}-{month}-{day} is beyond the supported Gregorian range")
    return date.fromordinal(ordinal)


def hijri_day_number(hijri: HijriDate) -> int:
    """Pure Hijri day count (Julian day number) of ``hijri``."""
    return hijri.day_number()


def get_hijri_month_name(month: int) -> str:
    """Canonical transliterated name of a Hijri month."""
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise OutOfRangeError(f"No Hijri month number {month!r}; expected 1..12")
    return HIJRI_MONTH_NAMES[month - 1]


def is_islamic_holiday(hijri: HijriDate) -> HolidayInfo:
    """Look ``hijri`` up in the core holiday table."""
    name = ISLAMIC_HOLIDAYS.get((hijri.month, hijri.day))
    return HolidayInfo(is_holiday=name is not None, name=name)


def get_islamic_holiday(hijri: HijriDate) -> HolidayInfo:
    """Like is_islamic_holiday, with New Year, Mawlid and Isra and Mi'raj added."""
    name = EXTENDED_ISLAMIC_HOLIDAYS.get((hijri.month, hijri.day))
    return HolidayInfo(is_holiday=name is not None, name=name)


def format_hijri_date(hijri: HijriDate) -> str:
    """e.g. ``15 Ramadan 1446``."""
    return f"{hijri.day} {HIJRI_MONTH_NAMES[hijri.month - 1]} {hijri.year}"


def format_gregorian_date(value: date) -> str:
    """e.g. ``March 15, 2025``. Locale independent."""
    return f"{_GREGORIAN_MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


@dataclass(frozen=True)
class DualDate:
    """A Gregorian date paired with its Hijri equivalent.

    Only build through ``from_gregorian`` or ``from_hijri``: ``source``
    records which side the user picked, and the other side is always
    derived from it.
    """

    gregorian: date
    hijri: HijriDate
    gregorian_string: str
    hijri_string: str
    source: str

    @classmethod
    def from_gregorian(cls, value: date) -> DualDate:
        hijri = gregorian_to_hijri(value)
        return cls(
            gregorian=value,
            hijri=hijri,
            gregorian_string=format_gregorian_date(value),
            hijri_string=format_hijri_date(hijri),
            source="gregorian",
        )

    @classmethod
    def from_hijri(cls, hijri: HijriDate) -> DualDate:
        gregorian = hijri.to_gregorian()
        return cls(
            gregorian=gregorian,
            hijri=hijri,
            gregorian_string=format_gregorian_date(gregorian),
            hijri_string=format_hijri_date(hijri),
            source="hijri",
        )

    def __str__(self) -> str:
        return format_dual_date(self)


def format_dual_date(dual: DualDate) -> str:
    """e.g. ``15 Ramadan 1446 / March 15, 2025``."""
    return f"{dual.hijri_string} / {dual.gregorian_string}"


def today_dual(today: date | None = None) -> DualDate:
    """Current date in both calendars."""
    return DualDate.from_gregorian(today or date.today())


def hijri_month_range(year: int, month: int) -> tuple[date, date]:
    """First and last Gregorian dates of a Hijri month."""
    last = get_days_in_hijri_month(year, month)
    return hijri_to_gregorian(year, month, 1), hijri_to_gregorian(year, month, last)


def convert_date_range(start: date, end: date) -> tuple[HijriDate, HijriDate]:
    """Convert a Gregorian date range to Hijri end points."""
    if end < start:
        raise InvalidDateError(f"Range end {end.isoformat()} precedes start {start.isoformat()}")
    return gregorian_to_hijri(start), gregorian_to_hijri(end)
