"""
Token formats for typed date text.

Supported tokens:
  DD   - day of month, zero-padded (01-31)
  D    - day of month (1-31)
  MM   - month, zero-padded (01-12)
  M    - month (1-12)
  YYYY - full year
  YY   - two-digit year (25 -> 2025 when parsing)

Every other character is a literal. Parsing is lenient about padding
(``1/3/2025`` matches ``DD/MM/YYYY``) but never accepts an impossible date.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .core.date import CalendarDate

# Longest first so YYYY wins over YY, DD over D, MM over M.
_TOKENS = ("YYYY", "YY", "MM", "DD", "M", "D")

_PATTERNS: Dict[str, str] = {
    "YYYY": r"([0-9]{4})",
    "YY": r"([0-9]{2})",
    "MM": r"([0-9]{1,2})",
    "M": r"([0-9]{1,2})",
    "DD": r"([0-9]{1,2})",
    "D": r"([0-9]{1,2})",
}

_FORMATTERS: Dict[str, Callable[[CalendarDate], str]] = {
    "YYYY": lambda d: f"{d.year:04d}",
    "YY": lambda d: f"{d.year % 100:02d}",
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "DD": lambda d: f"{d.day:02d}",
    "D": lambda d: str(d.day),
}

RANGE_SEPARATORS = (" – ", " — ", " - ")


def _tokenize(fmt: str) -> List[Tuple[bool, str]]:
    """Split a format into (is_token, text) pieces."""
    out: List[Tuple[bool, str]] = []
    i = 0
    while i < len(fmt):
        for tok in _TOKENS:
            if fmt.startswith(tok, i):
                out.append((True, tok))
                i += len(tok)
                break
        else:
            out.append((False, fmt[i]))
            i += 1
    return out


@lru_cache(maxsize=64)
def _compile(fmt: str) -> Tuple[re.Pattern, Tuple[str, ...]]:
    regex = ""
    tokens = []
    for is_token, text in _tokenize(fmt):
        if is_token:
            regex += _PATTERNS[text]
            tokens.append(text)
        else:
            regex += re.escape(text)
    return re.compile(regex), tuple(tokens)


# ============================================================
# Formatting
# ============================================================

def format_date(d: CalendarDate, fmt: str) -> str:
    return "".join(_FORMATTERS[text](d) if is_token else text for is_token, text in _tokenize(fmt))

def format_range(start: CalendarDate, end: CalendarDate, fmt: str) -> str:
    return f"{format_date(start, fmt)} – {format_date(end, fmt)}"

def format_multiple(dates: Sequence[CalendarDate], fmt: str, max_display: Optional[int] = None) -> str:
    """Comma-separated dates, or a count once there are more than ``max_display``."""
    if not dates:
        return ""
    if max_display is not None and len(dates) > max_display:
        return f"{len(dates)} dates selected"
    return ", ".join(format_date(d, fmt) for d in dates)


# ============================================================
# Parsing
# ============================================================

def parse_date(text: str, fmt: str) -> Optional[CalendarDate]:
    s = text.strip()
    if not s:
        return None
    regex, tokens = _compile(fmt)
    m = regex.fullmatch(s)
    if m is None:
        return None

    year = month = day = 0
    for tok, value in zip(tokens, m.groups()):
        n = int(value)
        if tok == "YYYY":
            year = n
        elif tok == "YY":
            year = 2000 + n
        elif tok in ("MM", "M"):
            month = n
        else:
            day = n

    if year < 1:
        return None
    return CalendarDate.of(year, month, day)

def parse_date_range(text: str, fmt: str) -> Optional[Tuple[CalendarDate, CalendarDate]]:
    s = text.strip()
    for sep in RANGE_SEPARATORS:
        idx = s.find(sep)
        if idx == -1:
            continue
        start = parse_date(s[:idx], fmt)
        end = parse_date(s[idx + len(sep):], fmt)
        if start is not None and end is not None:
            return start, end
    return None

def parse_date_multiple(text: str, fmt: str) -> List[CalendarDate]:
    """Comma-separated dates; parts that fail to parse are dropped."""
    out = []
    for part in text.split(","):
        d = parse_date(part, fmt)
        if d is not None:
            out.append(d)
    return out
