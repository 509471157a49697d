from __future__ import annotations
from typing import Tuple

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(y: int) -> bool:
    """Proleptic Gregorian leap rule (year 0 is a leap year)."""
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

def days_in_month(y: int, m: int) -> int:
    if m == 2 and is_leap_year(y):
        return 29
    return _MONTH_LENGTHS[m - 1]

def to_jdn(y: int, m: int, day: int) -> int:
    """Convert a proleptic Gregorian (y, m, d) to Julian Day Number (JDN).

    Floor division keeps the formula valid for years <= 0.
    """
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def weekday_from_jdn(jdn: int) -> int:
    # JDN 0 is a Monday; shift so that 0=Sun..6=Sat.
    return (jdn + 1) % 7
