class CalpickError(Exception):
    """Base error."""

class InvalidDateError(CalpickError, ValueError):
    """Raised when a (year, month, day) triple is not a real civil date."""

class InvalidTimezoneError(CalpickError, ValueError):
    """Raised when a timezone identifier cannot be resolved."""

class ConfigError(CalpickError, ValueError):
    """Raised when a configuration file cannot be read as a config object."""
