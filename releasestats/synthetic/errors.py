"""releasestats – Generation errors.

All errors signal a caller or configuration mistake rather than a
transient condition; none of them are retried internally.
"""

from __future__ import annotations

from datetime import date

from releasestats.core.time import DateRange


class GenerationError(ValueError):
    """Base class for errors raised while generating statistics."""


class NoDataAvailable(GenerationError):
    """No release or no data set overlaps the requested range."""

    def __init__(self, range: DateRange) -> None:
        super().__init__(f"No available information for range {range}")
        self.range = range


class MissingReleaseCoverage(GenerationError):
    """A day inside the requested range has no release window."""

    def __init__(self, day: date) -> None:
        super().__init__(f"No release information for {day.isoformat()}")
        self.day = day


class MissingDataSetCoverage(GenerationError):
    """A day inside the requested range has no data set window."""

    def __init__(self, day: date) -> None:
        super().__init__(f"No data information for {day.isoformat()}")
        self.day = day


class CatalogConfigError(ValueError):
    """A catalog definition file is malformed."""
