"""Tests for synthetic statistics value objects.

These tests cover the validation rules of data sets and releases, the
event transformation rules and the GenerationResult views.
"""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from releasestats.core.time import DateRange, Weekday
from releasestats.synthetic import (
    CapEvent,
    DataSet,
    Entry,
    FixedValueEvent,
    GenerationResult,
    OffsetEvent,
    Release,
    ReleaseVersions,
    ScaleEvent,
)


JANUARY = DateRange(date(2024, 1, 1), date(2024, 1, 31))


def _totals(value: int = 100) -> dict:
    return {weekday: value + int(weekday) for weekday in Weekday}


class TestDataSet:
    def test_total_for_uses_weekday_of_day(self) -> None:
        data_set = DataSet(window=JANUARY, data=_totals(100))

        assert data_set.total_for(date(2024, 1, 1)) == 100  # Monday
        assert data_set.total_for(date(2024, 1, 7)) == 106  # Sunday

    def test_integer_weekday_keys_are_accepted(self) -> None:
        data_set = DataSet(window=JANUARY, data={i: 10 for i in range(7)})

        assert data_set.data[Weekday.WEDNESDAY] == 10

    def test_missing_weekday_is_rejected(self) -> None:
        totals = _totals()
        del totals[Weekday.SUNDAY]

        with pytest.raises(ValueError, match="SUNDAY"):
            DataSet(window=JANUARY, data=totals)

    def test_non_integer_totals_are_rejected(self) -> None:
        for bad in (12.9, True):
            totals = _totals()
            totals[Weekday.MONDAY] = bad

            with pytest.raises(ValueError, match="integer"):
                DataSet(window=JANUARY, data=totals)

    def test_negative_total_is_rejected(self) -> None:
        totals = _totals()
        totals[Weekday.MONDAY] = -1

        with pytest.raises(ValueError):
            DataSet(window=JANUARY, data=totals)

    def test_totals_are_isolated_from_caller_mapping(self) -> None:
        """Mutating the source dict after construction has no effect."""

        totals = _totals(100)
        data_set = DataSet(window=JANUARY, data=totals)
        totals[Weekday.MONDAY] = 0

        assert data_set.total_for(date(2024, 1, 1)) == 100
        with pytest.raises(TypeError):
            data_set.data[Weekday.MONDAY] = 0  # type: ignore[index]

    def test_covers_and_overlaps(self) -> None:
        data_set = DataSet(window=JANUARY, data=_totals())

        assert data_set.covers(date(2024, 1, 31))
        assert not data_set.covers(date(2024, 2, 1))
        assert data_set.overlaps(DateRange(date(2023, 12, 1), date(2024, 1, 1)))


class TestRelease:
    def test_current_version_is_required(self) -> None:
        with pytest.raises(ValueError):
            ReleaseVersions(current="")

    def test_optional_versions_default_to_none(self) -> None:
        release = Release(window=JANUARY, data=ReleaseVersions(current="1.0.0"))

        assert release.data.maintenance is None
        assert release.data.next is None


class TestEventTypes:
    def test_scale_event_spikes_and_dips(self) -> None:
        assert ScaleEvent(factor=2.5).transform_value(100) == 250
        assert ScaleEvent(factor=0.5).transform_value(101) == 50
        assert ScaleEvent(factor=0.0).transform_value(100) == 0

    def test_scale_event_rejects_negative_factor(self) -> None:
        with pytest.raises(ValueError):
            ScaleEvent(factor=-1.0)

    def test_offset_event_floors_at_zero(self) -> None:
        assert OffsetEvent(delta=25).transform_value(100) == 125
        assert OffsetEvent(delta=-30).transform_value(100) == 70
        assert OffsetEvent(delta=-500).transform_value(100) == 0

    def test_fixed_value_event_replaces_count(self) -> None:
        assert FixedValueEvent(value=7).transform_value(12345) == 7

    def test_cap_event_clamps_only_above_limit(self) -> None:
        cap = CapEvent(limit=500)

        assert cap.transform_value(10_000) == 500
        assert cap.transform_value(120) == 120


class TestGenerationResult:
    def _result(self) -> GenerationResult:
        d1, d2 = date(2024, 1, 1), date(2024, 1, 2)
        return GenerationResult(
            range=DateRange(d1, d2),
            entries={
                "2.0.0": [Entry(d1, 900), Entry(d2, 910)],
                "1.9.0": [Entry(d1, 80), Entry(d2, 85)],
            },
        )

    def test_versions_keep_first_seen_order(self) -> None:
        assert self._result().versions() == ["2.0.0", "1.9.0"]

    def test_series_for_unknown_version_is_empty(self) -> None:
        result = self._result()

        assert result.series("0.1.0") == []
        assert [e.value for e in result.series("1.9.0")] == [80, 85]

    def test_dates_and_daily_totals(self) -> None:
        result = self._result()

        assert result.dates() == [date(2024, 1, 1), date(2024, 1, 2)]
        assert result.total_for(date(2024, 1, 1)) == 980
        assert result.total_for(date(2024, 1, 3)) == 0

    def test_to_frame_is_long_format(self) -> None:
        frame = self._result().to_frame()

        assert list(frame.columns) == ["version", "date", "value"]
        assert len(frame) == 4
        assert frame["version"].tolist() == ["2.0.0", "2.0.0", "1.9.0", "1.9.0"]
        assert frame["value"].sum() == 1975

    def test_to_frame_of_empty_result(self) -> None:
        empty = GenerationResult(range=DateRange(date(2024, 1, 1), date(2024, 1, 1)))
        frame = empty.to_frame()

        assert isinstance(frame, pd.DataFrame)
        assert frame.empty
        assert list(frame.columns) == ["version", "date", "value"]
