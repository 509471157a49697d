from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from .config import build_engine, parse_messages
from .core.date import CalendarDate
from .core.types import ConstraintOptions
from .engines.constraints import ConstraintEngine
from .engines.factory import make_engine

OptionsLike = Union[ConstraintOptions, Mapping[str, Any]]


def engine_for(options: OptionsLike, messages: Optional[Mapping[str, str]] = None) -> ConstraintEngine:
    """Typed options compile directly; plain-data configs go through the config boundary.

    Message keys may be camelCase or reason kinds on either path.
    """
    if isinstance(options, ConstraintOptions):
        return make_engine(options, parse_messages(messages))
    return build_engine(options, messages)

# ============================================================
# One-off helpers (compile, ask once, discard)
# ============================================================

def is_date_disabled(d: CalendarDate, options: OptionsLike) -> bool:
    return engine_for(options).is_date_disabled(d)

def is_range_valid(start: CalendarDate, end: CalendarDate, options: OptionsLike) -> bool:
    return engine_for(options).is_range_valid(start, end)

def disabled_reasons(
    d: CalendarDate, options: OptionsLike, messages: Optional[Mapping[str, str]] = None
) -> List[str]:
    return engine_for(options, messages).disabled_reasons(d)
