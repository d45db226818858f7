"""releasestats – Synthetic statistics types.

This module defines the value objects consumed and produced by the
statistics generator: windowed datasets and releases, date-stamped
events with their transformation rules, and the generation result.

All records are immutable once constructed. They are built from static
configuration (see :mod:`releasestats.synthetic.loader`) and only read
during generation.
"""

from __future__ import annotations

# ============================================================================
# Imports
# ============================================================================

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, Generic, List, Mapping, Optional, TypeVar

import pandas as pd

from releasestats.core.time import DateRange, Weekday
from releasestats.core.types import VersionId, WeekdayTotals

T = TypeVar("T")


# ============================================================================
# Windowed records
# ============================================================================


@dataclass(frozen=True)
class WindowedRecord(Generic[T]):
    """A payload that applies over a window of calendar days.

    Attributes:
        window: Inclusive range of days the payload applies to.
        data: The payload itself.
    """

    window: DateRange
    data: T

    def covers(self, day: date) -> bool:
        """Return True if ``day`` falls inside this record's window."""

        return self.window.contains(day)

    def overlaps(self, other: DateRange) -> bool:
        """Return True if this record's window intersects ``other``."""

        return self.window.overlaps(other)


@dataclass(frozen=True)
class DataSet(WindowedRecord[WeekdayTotals]):
    """Baseline total traffic per weekday over a window.

    ``data`` maps every :class:`Weekday` to a non-negative count. The
    mapping is stored read-only.
    """

    def __post_init__(self) -> None:
        totals: Dict[Weekday, int] = {}
        for key, value in dict(self.data).items():
            weekday = Weekday(key)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                msg = f"Total for {weekday.name} in data set {self.window} must be an integer, got {value!r}"
                raise ValueError(msg)
            if value < 0:
                msg = f"Negative total {value} for {weekday.name} in data set {self.window}"
                raise ValueError(msg)
            totals[weekday] = int(value)

        missing = [w.name for w in Weekday if w not in totals]
        if missing:
            msg = f"Data set {self.window} is missing totals for: {', '.join(missing)}"
            raise ValueError(msg)

        object.__setattr__(self, "data", MappingProxyType(totals))

    def total_for(self, day: date) -> int:
        """Return the baseline total for the weekday of ``day``."""

        return self.data[Weekday.of(day)]


@dataclass(frozen=True)
class ReleaseVersions:
    """Version identifiers active during a release window.

    Attributes:
        current: The generally available version; always present.
        maintenance: Previous line still receiving fixes, if any.
        next: Upcoming version in preview, if any.
    """

    current: VersionId
    maintenance: Optional[VersionId] = None
    next: Optional[VersionId] = None

    def __post_init__(self) -> None:
        if not self.current:
            raise ValueError("A release must define a current version")


@dataclass(frozen=True)
class Release(WindowedRecord[ReleaseVersions]):
    """Set of active versions over a window."""


# ============================================================================
# Events
# ============================================================================


class EventType(ABC):
    """Transformation rule applied to a day's count.

    Implementations are pure: the same input always yields the same
    output and no state is touched.
    """

    @abstractmethod
    def transform_value(self, value: int) -> int:
        """Return the transformed count for ``value``."""


@dataclass(frozen=True)
class ScaleEvent(EventType):
    """Multiply the count by ``factor`` (>1 spikes, <1 dips)."""

    factor: float

    def __post_init__(self) -> None:
        if self.factor < 0:
            raise ValueError(f"Scale factor must be non-negative, got {self.factor}")

    def transform_value(self, value: int) -> int:
        return max(int(value * self.factor), 0)


@dataclass(frozen=True)
class OffsetEvent(EventType):
    """Add ``delta`` to the count, flooring at zero."""

    delta: int

    def transform_value(self, value: int) -> int:
        return max(value + int(self.delta), 0)


@dataclass(frozen=True)
class FixedValueEvent(EventType):
    """Replace the count with an absolute ``value``."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Fixed value must be non-negative, got {self.value}")

    def transform_value(self, value: int) -> int:
        return int(self.value)


@dataclass(frozen=True)
class CapEvent(EventType):
    """Clamp the count to at most ``limit`` (e.g. a partial outage)."""

    limit: int

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"Cap limit must be non-negative, got {self.limit}")

    def transform_value(self, value: int) -> int:
        return min(value, int(self.limit))


@dataclass(frozen=True)
class Event:
    """One-day anomaly such as a release spike or an outage.

    Attributes:
        date: Day the event applies to.
        type: Transformation applied to every version's count that day.
        name: Optional human-readable label.
    """

    date: date
    type: EventType
    name: Optional[str] = None


# ============================================================================
# Generation result
# ============================================================================


@dataclass(frozen=True)
class Entry:
    """Count for a single version on a single day."""

    date: date
    value: int


@dataclass(frozen=True)
class GenerationResult:
    """Per-version daily counts for a date range.

    Attributes:
        range: The range the result was generated for.
        entries: Mapping from version identifier to its entries in
            chronological order. Keys keep first-seen order.
    """

    range: DateRange
    entries: Mapping[VersionId, List[Entry]] = field(default_factory=dict)

    def versions(self) -> List[VersionId]:
        """Return version identifiers in first-seen order."""

        return list(self.entries.keys())

    def series(self, version: VersionId) -> List[Entry]:
        """Return the entries for ``version`` (empty if unknown)."""

        return list(self.entries.get(version, []))

    def dates(self) -> List[date]:
        """Return the distinct days present in the result, ascending."""

        return sorted({entry.date for values in self.entries.values() for entry in values})

    def total_for(self, day: date) -> int:
        """Return the sum of every version's count on ``day``."""

        return sum(
            entry.value
            for values in self.entries.values()
            for entry in values
            if entry.date == day
        )

    def to_frame(self) -> pd.DataFrame:
        """Return the result as a long-format DataFrame.

        Columns are ``version``, ``date`` and ``value``; rows are
        ordered by version (first-seen order) and then by date.
        """

        rows = [
            {"version": version, "date": entry.date, "value": entry.value}
            for version, values in self.entries.items()
            for entry in values
        ]
        if not rows:
            return pd.DataFrame(columns=["version", "date", "value"])
        return pd.DataFrame(rows, columns=["version", "date", "value"])
