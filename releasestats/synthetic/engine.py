"""releasestats – Series synthesizer.

This module implements the day-by-day walk that turns release windows,
data set windows and events into per-version daily counts.

For every day of the requested range the synthesizer:

- advances to the release and data set windows covering the day,
- splits the data set's weekday total between the active versions
  using fixed adoption ratios,
- jitters each share with a small random dip-then-bump,
- applies the events registered for that day.

Windows are consumed strictly in chronological order and the walk never
backtracks. A day without a covering window aborts generation; there is
no partial-result mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np

from releasestats.core.logging import get_logger
from releasestats.core.time import DateRange

from .errors import MissingDataSetCoverage, MissingReleaseCoverage, NoDataAvailable
from .types import DataSet, Entry, Event, GenerationResult, Release

logger = get_logger(__name__)


# Share of the daily total per version tier, depending on whether a
# "next" version is previewed.
CURRENT_RATIO = 0.92
MAINTENANCE_RATIO = 0.10
CURRENT_RATIO_WITH_NEXT = 0.90
MAINTENANCE_RATIO_WITH_NEXT = 0.08
NEXT_RATIO = 0.02

# Jitter: flat reduction followed by a random bump of up to this share.
JITTER_REDUCTION = 0.05
JITTER_BUMP = 0.10


def jitter(total: int, ratio: float, rng: np.random.Generator) -> int:
    """Return ``ratio * total`` with a mild random dip-then-bump.

    The value is reduced by 5% and then inflated by ``U * 10%`` of the
    reduced value, ``U`` uniform in ``[0, 1)``, before truncating toward
    zero. The result lies in ``[0.95, 1.045) * ratio * total``.
    """

    value = ratio * total
    value = value - value * JITTER_REDUCTION
    value = value + value * float(rng.random()) * JITTER_BUMP
    return int(value)


def apply_events(value: int, events: Sequence[Event]) -> int:
    """Apply same-day ``events`` to ``value``.

    Each event transforms the original value; the result of the last
    event wins. Without events ``value`` is returned unchanged.
    """

    result = value
    for event in events:
        result = event.type.transform_value(value)
    return result


@dataclass
class SeriesSynthesizer:
    """Generate per-version daily counts over a date range.

    Attributes:
        range: Range to generate; every day must be covered.
        releases: Releases overlapping ``range``, sorted by window start.
        data_sets: Data sets overlapping ``range``, sorted by window start.
        events: Index of events by day, restricted to ``range``.
        rng: Randomness provider used for jitter.
    """

    range: DateRange
    releases: Sequence[Release]
    data_sets: Sequence[DataSet]
    events: Mapping[date, List[Event]] = field(default_factory=dict)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def __post_init__(self) -> None:
        self.releases = tuple(self.releases)
        self.data_sets = tuple(self.data_sets)
        if not self.releases or not self.data_sets:
            raise NoDataAvailable(self.range)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Walk the range day by day and return the generated counts.

        Raises:
            MissingReleaseCoverage: A day has no covering release.
            MissingDataSetCoverage: A day has no covering data set.
        """

        release_idx = 0
        data_set_idx = 0
        entries: Dict[str, List[Entry]] = {}

        current_day = self.range.start
        while current_day <= self.range.end:
            release_idx = self._advance_release(release_idx, current_day)
            data_set_idx = self._advance_data_set(data_set_idx, current_day)

            release = self.releases[release_idx]
            total = self.data_sets[data_set_idx].total_for(current_day)
            day_events = self.events.get(current_day, [])

            for version, ratio in self._version_ratios(release):
                value = apply_events(jitter(total, ratio, self.rng), day_events)
                entries.setdefault(version, []).append(Entry(date=current_day, value=value))

            current_day = current_day + timedelta(days=1)

        logger.info(
            "SeriesSynthesizer.generate: range=%s days=%d versions=%d events=%d",
            self.range,
            self.range.num_days,
            len(entries),
            sum(len(v) for v in self.events.values()),
        )
        return GenerationResult(range=self.range, entries=entries)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _advance_release(self, idx: int, day: date) -> int:
        """Return the index of the release covering ``day``, from ``idx`` on."""

        while not self.releases[idx].covers(day):
            if self.releases[idx].window.start > day or idx + 1 >= len(self.releases):
                raise MissingReleaseCoverage(day)
            idx += 1
            logger.debug("Advanced to release %s on %s", self.releases[idx].window, day)
        return idx

    def _advance_data_set(self, idx: int, day: date) -> int:
        """Return the index of the data set covering ``day``, from ``idx`` on."""

        while not self.data_sets[idx].covers(day):
            if self.data_sets[idx].window.start > day or idx + 1 >= len(self.data_sets):
                raise MissingDataSetCoverage(day)
            idx += 1
            logger.debug("Advanced to data set %s on %s", self.data_sets[idx].window, day)
        return idx

    @staticmethod
    def _version_ratios(release: Release) -> List[Tuple[str, float]]:
        """Return ``(version, ratio)`` pairs active for ``release``.

        Order is current, maintenance, next; absent versions are skipped.
        """

        versions = release.data
        has_next = versions.next is not None

        ratios = [(versions.current, CURRENT_RATIO_WITH_NEXT if has_next else CURRENT_RATIO)]
        if versions.maintenance is not None:
            ratios.append(
                (versions.maintenance, MAINTENANCE_RATIO_WITH_NEXT if has_next else MAINTENANCE_RATIO)
            )
        if versions.next is not None:
            ratios.append((versions.next, NEXT_RATIO))
        return ratios
