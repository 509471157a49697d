"""
calpick.core.date
-----------------
CalendarDate: an immutable civil date stored as plain integers.

All arithmetic runs on Julian Day Numbers, so nothing here depends on a
timezone or on the range of ``datetime.date``. The wall clock is read in
exactly one place (``CalendarDate.today``); ``datetime.date`` is touched only
at the ``from_date``/``to_date``/``format`` boundary.
"""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import default_locale
from babel.dates import format_date

from .errors import InvalidDateError, InvalidTimezoneError
from .time import days_in_month, from_jdn, to_jdn, weekday_from_jdn

# Expanded years carry a sign only outside 0000..9999, never as "-0000".
_ISO_RE = re.compile(r"(\+[1-9][0-9]{4,}|-(?!0000-)[0-9]{4}|-[1-9][0-9]{4,}|[0-9]{4})-([0-9]{2})-([0-9]{2})")

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_timezone(name: Optional[str]) -> Optional[_dt.tzinfo]:
    """Resolve a timezone name into a tzinfo.

    Supported forms:
      - None / "" / "local" -> None (the machine's local timezone)
      - "UTC" / "Z" / "GMT" -> datetime.timezone.utc
      - fixed offsets: "+02:00", "+0200", "-05:00"
      - IANA names, e.g. "Europe/Bucharest"

    Raises InvalidTimezoneError for anything else.
    """
    if name is None:
        return None
    s = str(name).strip()
    low = s.lower()
    if not s or low in {"local", "system"}:
        return None
    if low in {"utc", "z", "gmt"}:
        return _dt.timezone.utc

    m = _OFFSET_RE.match(s)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh, mm = int(hh_s), int(mm_s)
        if hh > 23 or mm > 59:
            raise InvalidTimezoneError(f"Invalid timezone offset: {s!r}")
        sign = 1 if sign_s == "+" else -1
        return _dt.timezone(_dt.timedelta(minutes=sign * (hh * 60 + mm)))

    try:
        return ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise InvalidTimezoneError(f"Invalid timezone identifier: {s!r}") from ex


def _now(tz: Optional[_dt.tzinfo]) -> _dt.datetime:
    return _dt.datetime.now(tz)


def _default_locale() -> str:
    return default_locale("LC_TIME") or "en_US"


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A proleptic Gregorian civil date. Field order gives the total order."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidDateError(f"{name} must be an int, got {v!r}")
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise InvalidDateError(f"day out of range for {self.year}-{self.month:02d}: {self.day}")

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> Optional[CalendarDate]:
        """Non-raising constructor: None when the triple is not a real date."""
        try:
            return cls(year, month, day)
        except InvalidDateError:
            return None

    @classmethod
    def today(cls, timezone: Optional[str] = None) -> CalendarDate:
        """Current civil date in ``timezone`` (local timezone when omitted)."""
        now = _now(resolve_timezone(timezone))
        return cls(now.year, now.month, now.day)

    @classmethod
    def from_iso(cls, s: str) -> Optional[CalendarDate]:
        """Parse strict ``YYYY-MM-DD``. Returns None for anything invalid.

        Years outside 0000..9999 use the ISO 8601 expanded form (``+10000-01-01``).
        """
        if not isinstance(s, str):
            return None
        m = _ISO_RE.fullmatch(s)
        if m is None:
            return None
        y, mo, d = (int(g) for g in m.groups())
        if not (1 <= mo <= 12 and 1 <= d <= 31):
            return None
        return cls.of(y, mo, d)

    @classmethod
    def from_date(cls, d: _dt.date) -> CalendarDate:
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> CalendarDate:
        return cls(*from_jdn(jdn))

    # ---------------------------------------------------------
    # Serialization
    # ---------------------------------------------------------

    def to_iso(self) -> str:
        if 0 <= self.year <= 9999:
            y = f"{self.year:04d}"
        else:
            y = f"{'+' if self.year > 0 else '-'}{abs(self.year):04d}"
        return f"{y}-{self.month:02d}-{self.day:02d}"

    def to_date(self) -> _dt.date:
        if not _dt.MINYEAR <= self.year <= _dt.MAXYEAR:
            raise InvalidDateError(f"year {self.year} is outside datetime.date range")
        return _dt.date(self.year, self.month, self.day)

    def to_jdn(self) -> int:
        return to_jdn(self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.to_iso()

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def is_same(self, other: CalendarDate) -> bool:
        return self == other

    def is_before(self, other: CalendarDate) -> bool:
        return self < other

    def is_after(self, other: CalendarDate) -> bool:
        return self > other

    def is_between(self, a: CalendarDate, b: CalendarDate) -> bool:
        """Inclusive on both bounds; the bounds may be given in either order."""
        lo, hi = (a, b) if a <= b else (b, a)
        return lo <= self <= hi

    def diff_days(self, other: CalendarDate) -> int:
        """Days from self to other: positive when other is later."""
        return other.to_jdn() - self.to_jdn()

    # ---------------------------------------------------------
    # Arithmetic (always returns a new instance)
    # ---------------------------------------------------------

    def add_days(self, n: int) -> CalendarDate:
        return CalendarDate.from_jdn(self.to_jdn() + n)

    def add_months(self, n: int) -> CalendarDate:
        """Whole months; the day is clamped to the target month's length."""
        y, m0 = divmod(self.year * 12 + (self.month - 1) + n, 12)
        m = m0 + 1
        return CalendarDate(y, m, min(self.day, days_in_month(y, m)))

    def add_years(self, n: int) -> CalendarDate:
        y = self.year + n
        return CalendarDate(y, self.month, min(self.day, days_in_month(y, self.month)))

    def start_of_month(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, 1)

    def end_of_month(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.days_in_month())

    # ---------------------------------------------------------
    # Calendar attributes
    # ---------------------------------------------------------

    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday."""
        return weekday_from_jdn(self.to_jdn())

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def format(self, fmt: str = "medium", locale: Optional[str] = None) -> str:
        """Locale-aware display text via Babel.

        ``fmt`` is a CLDR width (short/medium/long/full) or a CLDR pattern
        such as ``"MMMM y"``.
        """
        return format_date(self.to_date(), format=fmt, locale=locale or _default_locale())
