"""releasestats – Synthetic statistics package.

This package exposes the types and helpers for generating synthetic
per-version daily download statistics from release windows, weekday
baselines and one-day events.
"""

from .types import (
    CapEvent,
    DataSet,
    Entry,
    Event,
    EventType,
    FixedValueEvent,
    GenerationResult,
    OffsetEvent,
    Release,
    ReleaseVersions,
    ScaleEvent,
    WindowedRecord,
)
from .errors import (
    CatalogConfigError,
    GenerationError,
    MissingDataSetCoverage,
    MissingReleaseCoverage,
    NoDataAvailable,
)
from .engine import SeriesSynthesizer
from .catalog import Catalog, CoverageGaps
from .loader import load_catalog, parse_catalog
