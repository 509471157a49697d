"""
calpick.engines.messages
------------------------
Reason kinds reported by the constraint engine and their default English text.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

BEFORE_MIN_DATE = "before_min_date"
AFTER_MAX_DATE = "after_max_date"
DISABLED_DATE = "disabled_date"
DISABLED_DAY_OF_WEEK = "disabled_day_of_week"
DISABLED_MONTH = "disabled_month"
DISABLED_YEAR = "disabled_year"

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType({
    BEFORE_MIN_DATE: "Before the earliest available date",
    AFTER_MAX_DATE: "After the latest available date",
    DISABLED_DATE: "This date is not available",
    DISABLED_DAY_OF_WEEK: "This day of the week is not available",
    DISABLED_MONTH: "This month is not available",
    DISABLED_YEAR: "This year is not available",
})

REASON_KINDS = tuple(DEFAULT_MESSAGES)


def resolve_messages(overrides: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Defaults with per-kind overrides applied. Unknown kinds are ignored."""
    out = dict(DEFAULT_MESSAGES)
    if overrides:
        for kind, text in overrides.items():
            if kind in out and text:
                out[kind] = text
    return MappingProxyType(out)
