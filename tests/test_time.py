# tests/test_time.py

import random
from datetime import date, timedelta

from calpick.core.time import days_in_month, from_jdn, is_leap_year, to_jdn, weekday_from_jdn

def test_jdn_matches_datetime():
    random.seed(42)
    # datetime.date covers years 1..9999; ordinal 1 == JDN 1721426
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d = date.fromordinal(jdn_in - 1721425)
        assert to_jdn(d.year, d.month, d.day) == jdn_in
        assert from_jdn(jdn_in) == (d.year, d.month, d.day)

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert to_jdn(2000, 1, 1) == 2451545
    assert from_jdn(2440588) == (1970, 1, 1)

def test_year_zero_and_negative_years():
    assert from_jdn(to_jdn(1, 1, 1) - 1) == (0, 12, 31)
    random.seed(7)
    for _ in range(2000):
        jdn_in = random.randint(-1_000_000, 1_721_426)
        assert to_jdn(*from_jdn(jdn_in)) == jdn_in

def test_leap_years():
    assert is_leap_year(2024)
    assert not is_leap_year(2025)
    assert not is_leap_year(1900)
    assert is_leap_year(2000)
    assert is_leap_year(0)
    assert is_leap_year(-4)

def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(2025, 4) == 30
    assert [days_in_month(2025, m) for m in range(1, 13)] == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

def test_weekday_sunday_zero():
    # Python: Monday=0 .. Sunday=6; ours: Sunday=0 .. Saturday=6
    d = date(2025, 6, 1)
    for i in range(14):
        x = d + timedelta(days=i)
        assert weekday_from_jdn(to_jdn(x.year, x.month, x.day)) == (x.weekday() + 1) % 7
    assert weekday_from_jdn(to_jdn(2025, 6, 7)) == 6  # Saturday
