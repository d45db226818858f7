"""releasestats – top-level package exports.

This module re-exports commonly used generator components for convenience.
"""

from releasestats.core.time import DateRange, Weekday
from releasestats.synthetic import (
    Catalog,
    GenerationResult,
    MissingDataSetCoverage,
    MissingReleaseCoverage,
    NoDataAvailable,
    load_catalog,
)
