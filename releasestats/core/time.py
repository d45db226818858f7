"""
releasestats: Calendar Utilities

This module implements the calendar primitives used by the statistics
generator: an inclusive range of calendar days and a weekday
enumeration aligned with :meth:`datetime.date.weekday`.

Key responsibilities:
- Represent closed date intervals and answer containment/overlap queries
- Enumerate the days of an interval in ascending order
- Name weekdays for per-weekday lookup tables

External dependencies:
- datetime: Standard library date arithmetic only

Thread safety: Thread-safe (immutable value objects, no shared state)
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Iterator

# ============================================================================
# Weekdays
# ============================================================================


class Weekday(IntEnum):
    """Day of the week, numbered like :meth:`date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Return the weekday of ``day``."""

        return cls(day.weekday())

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        """Return the weekday named ``name`` (case-insensitive).

        Three-letter abbreviations such as ``"mon"`` are accepted.

        Raises:
            ValueError: If ``name`` does not name a weekday.
        """

        key = name.strip().upper()
        for member in cls:
            if member.name == key or member.name[:3] == key:
                return member
        raise ValueError(f"Unknown weekday: {name!r}")


# ============================================================================
# Date ranges
# ============================================================================


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days ``[start, end]``.

    Attributes:
        start: First day of the range.
        end: Last day of the range; must not precede ``start``.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            msg = f"Invalid date range: start {self.start} is after end {self.end}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, start: str, end: str) -> "DateRange":
        """Build a range from two ISO-8601 (``YYYY-MM-DD``) strings."""

        return cls(date.fromisoformat(start), date.fromisoformat(end))

    @property
    def num_days(self) -> int:
        """Number of days in the range, both ends included."""

        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        """Return True if ``day`` lies within the range (inclusive)."""

        return self.start <= day <= self.end

    def overlaps(self, other: DateRange) -> bool:
        """Return True if this range and ``other`` share at least one day."""

        return self.start <= other.end and other.start <= self.end

    def days(self) -> Iterator[date]:
        """Yield every day of the range in ascending order."""

        current = self.start
        while current <= self.end:
            yield current
            current = current + timedelta(days=1)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
