"""Shared pytest fixtures for the textlog test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from textlog.config import WriterConfig
from textlog.models import LogEntry
from textlog.priorities import Priority

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_clock():
    """Clock returning a fixed UTC instant."""
    return lambda: FIXED_NOW


@pytest.fixture()
def log_dir(tmp_path) -> str:
    """A not-yet-existing nested directory for log files."""
    return str(tmp_path / "logs" / "app")


@pytest.fixture()
def config(log_dir) -> WriterConfig:
    return WriterConfig(file_name="test.php", file_path=log_dir)


@pytest.fixture()
def sample_entry() -> LogEntry:
    return LogEntry(
        message="boom",
        priority=Priority.ERROR,
        category="app",
        date=datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
    )
