"""releasestats – Statistics catalog.

The catalog is the entry point of the generator. It holds the full
collections of data sets, releases and events, restricts them to a
requested range and hands the result to a
:class:`~releasestats.synthetic.engine.SeriesSynthesizer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from releasestats.core.logging import get_logger
from releasestats.core.time import DateRange

from .engine import SeriesSynthesizer
from .types import DataSet, Event, GenerationResult, Release

logger = get_logger(__name__)


@dataclass(frozen=True)
class CoverageGaps:
    """Days of a range lacking a release or a data set window."""

    release_days: List[date] = field(default_factory=list)
    data_set_days: List[date] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.release_days or self.data_set_days)


class Catalog:
    """Immutable collection of data sets, releases and events.

    The collections are copied on construction so later changes to the
    caller's sequences do not affect generation.
    """

    def __init__(
        self,
        data_sets: Iterable[DataSet],
        releases: Iterable[Release],
        events: Iterable[Event] = (),
    ) -> None:
        self._data_sets: Tuple[DataSet, ...] = tuple(data_sets)
        self._releases: Tuple[Release, ...] = tuple(releases)
        self._events: Tuple[Event, ...] = tuple(events)

    @property
    def data_sets(self) -> Tuple[DataSet, ...]:
        return self._data_sets

    @property
    def releases(self) -> Tuple[Release, ...]:
        return self._releases

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(
        self,
        date_range: DateRange,
        rng: Optional[np.random.Generator] = None,
    ) -> GenerationResult:
        """Generate per-version daily counts for ``date_range``.

        Args:
            date_range: Range to generate.
            rng: Optional randomness provider; a fresh unseeded generator
                is used when omitted.

        Raises:
            NoDataAvailable: No release or no data set overlaps the range.
            MissingReleaseCoverage: A day of the range has no release.
            MissingDataSetCoverage: A day of the range has no data set.
        """

        synthesizer = SeriesSynthesizer(
            range=date_range,
            releases=self.releases_in_range(date_range),
            data_sets=self.data_sets_in_range(date_range),
            events=self.index_events(date_range),
            rng=rng if rng is not None else np.random.default_rng(),
        )
        return synthesizer.generate()

    def data_sets_in_range(self, date_range: DateRange) -> List[DataSet]:
        """Return data sets whose window overlaps ``date_range``."""

        matches = [d for d in self._data_sets if d.overlaps(date_range)]
        logger.debug("Catalog: %d/%d data sets match %s", len(matches), len(self._data_sets), date_range)
        return matches

    def releases_in_range(self, date_range: DateRange) -> List[Release]:
        """Return releases whose window overlaps ``date_range``."""

        matches = [r for r in self._releases if r.overlaps(date_range)]
        logger.debug("Catalog: %d/%d releases match %s", len(matches), len(self._releases), date_range)
        return matches

    def events_in_range(self, date_range: DateRange) -> List[Event]:
        """Return events dated inside ``date_range``."""

        return [e for e in self._events if date_range.contains(e.date)]

    def index_events(self, date_range: DateRange) -> Dict[date, List[Event]]:
        """Group the events of ``date_range`` by day, keeping listed order."""

        index: Dict[date, List[Event]] = {}
        for event in self.events_in_range(date_range):
            index.setdefault(event.date, []).append(event)
        return index

    def coverage_gaps(self, date_range: DateRange) -> CoverageGaps:
        """Return every day of ``date_range`` lacking a release or data set.

        Unlike :meth:`generate`, which stops at the first uncovered day,
        this reports all gaps so a catalog can be fixed in one pass.
        """

        releases = self.releases_in_range(date_range)
        data_sets = self.data_sets_in_range(date_range)
        gaps = CoverageGaps()
        for day in date_range.days():
            if not any(r.covers(day) for r in releases):
                gaps.release_days.append(day)
            if not any(d.covers(day) for d in data_sets):
                gaps.data_set_days.append(day)
        return gaps

    def __repr__(self) -> str:
        return (
            f"Catalog(data_sets={len(self._data_sets)}, releases={len(self._releases)}, "
            f"events={len(self._events)})"
        )
