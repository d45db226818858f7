"""
releasestats: Core Type Definitions

This module defines common type aliases shared across the package. It
exists to centralise frequently used type definitions and avoid
circular imports between higher-level modules.

External dependencies:
- typing: Standard library typing primitives only

Thread safety: Thread-safe (no mutable global state)
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from typing import Any, Dict, Mapping, TypeAlias

from releasestats.core.time import Weekday

# ============================================================================
# Type Aliases
# ============================================================================

# Raw mapping parsed from YAML/JSON configuration
ConfigDict: TypeAlias = Dict[str, Any]

# Baseline total count for each day of the week
WeekdayTotals: TypeAlias = Mapping[Weekday, int]

# Version identifier such as "3.2.0" or "3.3.0-M1"
VersionId: TypeAlias = str
