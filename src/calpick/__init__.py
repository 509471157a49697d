"""calpick public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    engine_for,
    is_date_disabled,
    is_range_valid,
    disabled_reasons,
)
from .config import (
    build_engine,
    merge_config,
    parse_options,
    validate_config,
)
from .core.date import CalendarDate
from .core.errors import CalpickError, ConfigError, InvalidDateError, InvalidTimezoneError
from .core.types import (
    ConstraintOptions,
    ConstraintProperties,
    DateRange,
    PeriodRule,
    RecurringMonths,
)
from .engines.constraints import ConstraintEngine
from .engines.factory import make_engine
from .engines.messages import DEFAULT_MESSAGES

__all__ = [
    "engine_for",
    "is_date_disabled",
    "is_range_valid",
    "disabled_reasons",
    "build_engine",
    "merge_config",
    "parse_options",
    "validate_config",
    "CalendarDate",
    "CalpickError",
    "ConfigError",
    "InvalidDateError",
    "InvalidTimezoneError",
    "ConstraintOptions",
    "ConstraintProperties",
    "DateRange",
    "PeriodRule",
    "RecurringMonths",
    "ConstraintEngine",
    "make_engine",
    "DEFAULT_MESSAGES",
]
