"""releasestats – Catalog loader.

Builds a :class:`~releasestats.synthetic.catalog.Catalog` from a YAML
definitions file. The expected schema is::

    datasets:
      - start: 2024-01-01
        end: 2024-06-30
        totals: {monday: 1200, tuesday: 1300, wednesday: 1300,
                 thursday: 1250, friday: 1100, saturday: 400, sunday: 300}
    releases:
      - start: 2024-01-01
        end: 2024-03-31
        current: "3.2.0"
        maintenance: "3.1.5"
        next: "3.3.0-M1"
    events:
      - date: 2024-02-15
        type: scale
        factor: 2.5
        name: "3.2.0 announcement"

``maintenance``, ``next`` and the whole ``events`` list are optional.
Event types are ``scale`` (``factor``), ``offset`` (``delta``), ``set``
(``value``) and ``cap`` (``limit``).
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import yaml

from releasestats.core.logging import get_logger
from releasestats.core.time import DateRange, Weekday
from releasestats.core.types import ConfigDict

from .catalog import Catalog
from .errors import CatalogConfigError
from .types import (
    CapEvent,
    DataSet,
    Event,
    EventType,
    FixedValueEvent,
    OffsetEvent,
    Release,
    ReleaseVersions,
    ScaleEvent,
)

logger = get_logger(__name__)


# Event type name -> (parameter key, constructor)
EVENT_TYPES: Dict[str, tuple[str, Callable[[Any], EventType]]] = {
    "scale": ("factor", lambda v: ScaleEvent(factor=_as_number(v))),
    "offset": ("delta", lambda v: OffsetEvent(delta=_as_int(v))),
    "set": ("value", lambda v: FixedValueEvent(value=_as_int(v))),
    "cap": ("limit", lambda v: CapEvent(limit=_as_int(v))),
}


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from the YAML file at ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogConfigError: If the file is not valid YAML or does not
            match the expected schema.
    """

    cfg_path = Path(path)
    if not cfg_path.exists():
        msg = f"Catalog file not found: {cfg_path}"
        raise FileNotFoundError(msg)

    try:
        raw: Any = yaml.safe_load(cfg_path.read_text())
    except yaml.YAMLError as exc:
        raise CatalogConfigError(f"Catalog file {cfg_path} is not valid YAML: {exc}") from exc

    catalog = parse_catalog(raw)
    logger.info("Loaded %r from %s", catalog, cfg_path)
    return catalog


def parse_catalog(raw: Any) -> Catalog:
    """Build a catalog from an already-parsed mapping.

    Data sets and releases are sorted by window start; events keep their
    listed order.
    """

    if not isinstance(raw, dict):
        raise CatalogConfigError("Catalog definition must be a mapping")

    data_sets = [
        _parse_data_set(item, idx) for idx, item in enumerate(_as_list(raw, "datasets"))
    ]
    releases = [
        _parse_release(item, idx) for idx, item in enumerate(_as_list(raw, "releases"))
    ]
    events = [
        _parse_event(item, idx) for idx, item in enumerate(_as_list(raw, "events", required=False))
    ]

    data_sets.sort(key=lambda d: d.window.start)
    releases.sort(key=lambda r: r.window.start)
    _check_disjoint(data_sets, "datasets")
    _check_disjoint(releases, "releases")
    return Catalog(data_sets=data_sets, releases=releases, events=events)


# ============================================================================
# Internal helpers
# ============================================================================


def _as_list(raw: ConfigDict, key: str, required: bool = True) -> List[Any]:
    value = raw.get(key)
    if value is None:
        if required:
            raise CatalogConfigError(f"Catalog is missing the '{key}' list")
        return []
    if not isinstance(value, list):
        raise CatalogConfigError(f"Catalog '{key}' must be a list")
    return value


def _as_date(value: Any, where: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise CatalogConfigError(f"{where}: invalid date {value!r}") from exc
    raise CatalogConfigError(f"{where}: expected a date, got {value!r}")


def _as_window(item: Mapping[str, Any], where: str) -> DateRange:
    start = _as_date(item.get("start"), f"{where}.start")
    end = _as_date(item.get("end"), f"{where}.end")
    try:
        return DateRange(start, end)
    except ValueError as exc:
        raise CatalogConfigError(f"{where}: {exc}") from exc


def _as_int(value: Any) -> int:
    # YAML booleans are ints in Python and floats would be truncated.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _as_optional_str(value: Any, where: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # An unquoted 3.10 reaches us as the float 3.1.
        raise CatalogConfigError(f"{where}: version must be a quoted string, got {value!r}")
    raise CatalogConfigError(f"{where}: expected a version string, got {value!r}")


def _check_disjoint(records: Sequence[DataSet] | Sequence[Release], key: str) -> None:
    """Reject windows that overlap; ``records`` must be sorted by start."""

    for prev, curr in zip(records, records[1:]):
        if curr.window.start <= prev.window.end:
            msg = f"Catalog '{key}' windows overlap: {prev.window} and {curr.window}"
            raise CatalogConfigError(msg)


def _parse_data_set(item: Any, idx: int) -> DataSet:
    where = f"datasets[{idx}]"
    if not isinstance(item, dict):
        raise CatalogConfigError(f"{where} must be a mapping")

    totals_raw = item.get("totals")
    if not isinstance(totals_raw, dict):
        raise CatalogConfigError(f"{where}.totals must map weekday names to counts")

    totals: Dict[Weekday, int] = {}
    for name, count in totals_raw.items():
        try:
            weekday = Weekday.parse(str(name))
            value = _as_int(count)
        except ValueError as exc:
            raise CatalogConfigError(f"{where}.totals.{name}: {exc}") from exc
        if weekday in totals:
            raise CatalogConfigError(f"{where}.totals: {weekday.name.lower()} is given more than once")
        totals[weekday] = value

    try:
        return DataSet(window=_as_window(item, where), data=totals)
    except ValueError as exc:
        if isinstance(exc, CatalogConfigError):
            raise
        raise CatalogConfigError(f"{where}: {exc}") from exc


def _parse_release(item: Any, idx: int) -> Release:
    where = f"releases[{idx}]"
    if not isinstance(item, dict):
        raise CatalogConfigError(f"{where} must be a mapping")

    current = _as_optional_str(item.get("current"), f"{where}.current")
    if not current:
        raise CatalogConfigError(f"{where}: a release must define a current version")

    versions = ReleaseVersions(
        current=current,
        maintenance=_as_optional_str(item.get("maintenance"), f"{where}.maintenance"),
        next=_as_optional_str(item.get("next"), f"{where}.next"),
    )
    return Release(window=_as_window(item, where), data=versions)


def _parse_event(item: Any, idx: int) -> Event:
    where = f"events[{idx}]"
    if not isinstance(item, dict):
        raise CatalogConfigError(f"{where} must be a mapping")

    type_name = str(item.get("type", "")).lower()
    if type_name not in EVENT_TYPES:
        msg = f"{where}: unsupported event type {item.get('type')!r} (expected one of {', '.join(EVENT_TYPES)})"
        raise CatalogConfigError(msg)

    param_key, factory = EVENT_TYPES[type_name]
    if param_key not in item:
        raise CatalogConfigError(f"{where}: '{type_name}' events require '{param_key}'")

    try:
        event_type = factory(item[param_key])
    except (TypeError, ValueError) as exc:
        raise CatalogConfigError(f"{where}: {exc}") from exc

    name = item.get("name")
    return Event(
        date=_as_date(item.get("date"), f"{where}.date"),
        type=event_type,
        name=str(name) if name is not None else None,
    )
