"""Generate synthetic per-version download statistics as CSV.

This script loads a catalog of data sets, releases and events from YAML
and writes the generated daily counts for a date range in long format
(``version,date,value``).

Usage:
    # Generate Q1 2024 using the configured catalog (STATS_CATALOG_FILE)
    python -m releasestats.scripts.generate_stats --start 2024-01-01 --end 2024-03-31

    # Reproducible run from an explicit catalog into a file
    python -m releasestats.scripts.generate_stats \\
        --catalog configs/catalog.yaml \\
        --start 2024-01-01 \\
        --end 2024-06-30 \\
        --seed 42 \\
        --output stats.csv
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import numpy as np

from releasestats.core.config import get_config
from releasestats.core.logging import get_logger
from releasestats.core.time import DateRange
from releasestats.synthetic import CatalogConfigError, GenerationError, load_catalog

logger = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for generating statistics."""

    config = get_config()

    parser = argparse.ArgumentParser(
        description="Generate synthetic per-version download statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=config.catalog_file,
        help=f"YAML catalog of data sets, releases and events (default: {config.catalog_file})",
    )
    parser.add_argument("--start", type=str, required=True, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", type=str, required=True, help="Last day, inclusive (YYYY-MM-DD)")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.random_seed,
        help="Random seed for reproducible output (default: STATS_RANDOM_SEED)",
    )
    parser.add_argument("--output", type=str, help="Output CSV path (if omitted, writes to stdout)")

    args = parser.parse_args(argv)

    try:
        date_range = DateRange.parse(args.start, args.end)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        catalog = load_catalog(args.catalog)
        result = catalog.generate(date_range, rng=np.random.default_rng(args.seed))
    except (FileNotFoundError, CatalogConfigError, GenerationError) as exc:
        logger.debug("Statistics generation failed for %s with catalog %s", date_range, args.catalog)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    frame = result.to_frame()
    if args.output:
        frame.to_csv(args.output, index=False)
        logger.info("Wrote %d rows for %d versions to %s", len(frame), len(result.versions()), args.output)
    else:
        frame.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
