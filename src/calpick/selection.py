"""
Selection models for single, multiple, and range pickers.

These are the only mutable objects in the package; each belongs to one
widget instance. They do not consult constraints: callers check
``is_date_disabled`` / ``is_range_valid`` before calling ``toggle``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Set

from .core.date import CalendarDate


class Selection(Protocol):
    def is_selected(self, d: CalendarDate) -> bool: ...
    def toggle(self, d: CalendarDate) -> None: ...
    def clear(self) -> None: ...
    def to_list(self) -> List[CalendarDate]: ...
    def to_value(self) -> str: ...


class SingleSelection:
    """Zero or one selected date."""

    def __init__(self, initial: Optional[CalendarDate] = None):
        self.selected = initial

    def is_selected(self, d: CalendarDate) -> bool:
        return self.selected == d

    def toggle(self, d: CalendarDate) -> None:
        self.selected = None if self.selected == d else d

    def clear(self) -> None:
        self.selected = None

    def to_list(self) -> List[CalendarDate]:
        return [] if self.selected is None else [self.selected]

    def to_value(self) -> str:
        return "" if self.selected is None else self.selected.to_iso()


class MultipleSelection:
    """Any number of dates; reported in chronological order."""

    def __init__(self, initial: Iterable[CalendarDate] = ()):
        self._dates: Set[CalendarDate] = set(initial)

    def is_selected(self, d: CalendarDate) -> bool:
        return d in self._dates

    def toggle(self, d: CalendarDate) -> None:
        if d in self._dates:
            self._dates.remove(d)
        else:
            self._dates.add(d)

    def clear(self) -> None:
        self._dates.clear()

    def to_list(self) -> List[CalendarDate]:
        return sorted(self._dates)

    def to_value(self) -> str:
        return ", ".join(d.to_iso() for d in self.to_list())

    @property
    def count(self) -> int:
        return len(self._dates)


class RangeSelection:
    """
    Start/end pair built by successive clicks:
      1. nothing selected -> click sets start
      2. start only       -> click sets end (swapped if earlier; clicking start clears)
      3. both selected    -> click starts a new range
    """

    def __init__(self, start: Optional[CalendarDate] = None, end: Optional[CalendarDate] = None):
        self.start = start
        self.end = end

    def is_selected(self, d: CalendarDate) -> bool:
        return d == self.start or d == self.end

    def toggle(self, d: CalendarDate) -> None:
        if self.start is None:
            self.start = d
        elif self.end is None:
            if d < self.start:
                self.start, self.end = d, self.start
            elif d == self.start:
                self.start = None
            else:
                self.end = d
        else:
            self.start, self.end = d, None

    def clear(self) -> None:
        self.start = None
        self.end = None

    def to_list(self) -> List[CalendarDate]:
        if self.start is None:
            return []
        if self.end is None:
            return [self.start]
        return [self.start, self.end]

    def to_value(self) -> str:
        if self.start is None:
            return ""
        if self.end is None:
            return self.start.to_iso()
        return f"{self.start.to_iso()} – {self.end.to_iso()}"

    def is_in_range(self, d: CalendarDate, hover: Optional[CalendarDate] = None) -> bool:
        """Inclusive membership; with only a start, ``hover`` previews the end."""
        if self.start is not None and self.end is not None:
            return d.is_between(self.start, self.end)
        if self.start is not None and hover is not None:
            return d.is_between(self.start, hover)
        return False

    def is_partial(self) -> bool:
        return self.start is not None and self.end is None

    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None
