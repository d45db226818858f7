"""
releasestats: Logging Setup

This module provides centralised logging configuration and helper
functions for obtaining namespaced loggers.

Key responsibilities:
- Configure root logging handlers and formats
- Provide a helper to obtain module-specific loggers

External dependencies:
- logging: Python standard library logging framework

Thread safety: Thread-safe (logging module is process-global and
thread-safe under normal usage)
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

import logging
import sys
from typing import Optional

from releasestats.core.config import StatsConfig, get_config

# ============================================================================
# Public API
# ============================================================================


def setup_logging(config: Optional[StatsConfig] = None) -> None:
    """Configure application-wide logging.

    This function initialises the root logger and the ``releasestats``
    namespace logger. It is idempotent: calling it multiple times will
    not attach duplicate handlers.

    Log records go to stderr rather than stdout so that the CSV written
    by the command-line script stays clean when piped.

    Args:
        config: Optional configuration object. If omitted, the global
            configuration will be loaded via :func:`get_config`.
    """

    if config is None:
        config = get_config()

    root_logger = logging.getLogger()

    # Avoid attaching duplicate handlers if setup_logging is called again.
    if root_logger.handlers:
        return

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    file_handler = logging.FileHandler(config.log_file)
    file_handler.setFormatter(formatter)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    stats_logger = logging.getLogger("releasestats")
    stats_logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger for the given module.

    Args:
        name: Module-level ``__name__`` or any descriptive logger name.

    Returns:
        A :class:`logging.Logger` instance under the ``releasestats``
        namespace.
    """

    setup_logging()
    if name == "releasestats" or name.startswith("releasestats."):
        return logging.getLogger(name)
    return logging.getLogger(f"releasestats.{name}")
