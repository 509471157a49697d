# tests/test_formats.py

import pytest

from calpick import CalendarDate
from calpick.formats import (
    format_date,
    format_multiple,
    format_range,
    parse_date,
    parse_date_multiple,
    parse_date_range,
)

D = CalendarDate

@pytest.mark.parametrize("fmt,expected", [
    ("YYYY-MM-DD", "2025-03-07"),
    ("DD/MM/YYYY", "07/03/2025"),
    ("MM/DD/YYYY", "03/07/2025"),
    ("D.M.YY", "7.3.25"),
    ("YYYY年M月D日", "2025年3月7日"),
])
def test_format_date(fmt, expected):
    assert format_date(D(2025, 3, 7), fmt) == expected

def test_parse_date_formats():
    assert parse_date("07/03/2025", "DD/MM/YYYY") == D(2025, 3, 7)
    assert parse_date("03/07/2025", "MM/DD/YYYY") == D(2025, 3, 7)
    assert parse_date("7.3.25", "D.M.YY") == D(2025, 3, 7)
    assert parse_date("  2025-03-07 ", "YYYY-MM-DD") == D(2025, 3, 7)

def test_parse_is_lenient_about_padding():
    assert parse_date("1/3/2025", "DD/MM/YYYY") == D(2025, 3, 1)

@pytest.mark.parametrize("text", ["", "   ", "31/02/2025", "2025-03-07", "07-03-2025", "07/13/2025", "x7/03/2025", "0000-01-01"])
def test_parse_date_rejects(text):
    fmt = "YYYY-MM-DD" if text == "0000-01-01" else "DD/MM/YYYY"
    assert parse_date(text, fmt) is None

def test_literal_dots_are_not_wildcards():
    assert parse_date("07x03x2025", "DD.MM.YYYY") is None

def test_range_roundtrip_separators():
    a, b = D(2025, 6, 1), D(2025, 6, 15)
    text = format_range(a, b, "DD/MM/YYYY")
    assert text == "01/06/2025 – 15/06/2025"
    assert parse_date_range(text, "DD/MM/YYYY") == (a, b)
    assert parse_date_range("01/06/2025 - 15/06/2025", "DD/MM/YYYY") == (a, b)
    assert parse_date_range("01/06/2025 — 15/06/2025", "DD/MM/YYYY") == (a, b)
    assert parse_date_range("01/06/2025", "DD/MM/YYYY") is None
    assert parse_date_range("01/06/2025 - 31/06/2025", "DD/MM/YYYY") is None

def test_hyphenated_format_range():
    assert parse_date_range("2025-06-01 - 2025-06-15", "YYYY-MM-DD") == (D(2025, 6, 1), D(2025, 6, 15))

def test_multiple():
    dates = [D(2025, 6, 1), D(2025, 6, 3)]
    assert format_multiple(dates, "YYYY-MM-DD") == "2025-06-01, 2025-06-03"
    assert format_multiple(dates, "YYYY-MM-DD", max_display=1) == "2 dates selected"
    assert format_multiple([], "YYYY-MM-DD") == ""
    assert parse_date_multiple("2025-06-01, junk, 2025-06-03,2025-02-30", "YYYY-MM-DD") == dates
