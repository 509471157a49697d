"""Diagnostics package.

- pretty_month: month grid with disabled days marked for a given config
"""

__all__ = ["pretty_month"]
