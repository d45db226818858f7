"""
releasestats: Tests for Logging Setup

Test suite for ``releasestats.core.logging``. Covers:
- Basic logger configuration
- File and console handlers
- Namespaced logger retrieval
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from releasestats.core.config import StatsConfig
from releasestats.core.logging import get_logger, setup_logging


class TestLogging:
    """Tests for logging configuration and helpers."""

    def test_setup_logging_creates_log_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """setup_logging should create a log file and write messages to it."""

        log_file = tmp_path / "test.log"

        # Start from a clean logging configuration so setup_logging
        # attaches handlers for this test-specific file.
        root_logger = logging.getLogger()
        previous = list(root_logger.handlers)
        for handler in previous:
            root_logger.removeHandler(handler)

        try:
            monkeypatch.setenv("LOG_FILE", str(log_file))
            config = StatsConfig()

            setup_logging(config)
            logger = get_logger("test.logging")
            logger.info("Test log message")

            for handler in root_logger.handlers:
                handler.flush()

            assert log_file.exists()
            assert "Test log message" in log_file.read_text()
        finally:
            for handler in list(root_logger.handlers):
                root_logger.removeHandler(handler)
                handler.close()
            for handler in previous:
                root_logger.addHandler(handler)

    def test_setup_logging_is_idempotent(self) -> None:
        """Calling setup_logging twice must not attach duplicate handlers."""

        setup_logging()
        count = len(logging.getLogger().handlers)
        setup_logging()

        assert len(logging.getLogger().handlers) == count

    def test_get_logger_returns_namespaced_logger(self) -> None:
        """get_logger should place loggers under the 'releasestats' namespace."""

        assert get_logger("core.test").name == "releasestats.core.test"
        assert get_logger("releasestats.synthetic.engine").name == "releasestats.synthetic.engine"
