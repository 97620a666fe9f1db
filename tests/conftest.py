"""
Pytest configuration and shared fixtures for scopelog tests.
"""

import os
import tempfile
import threading
from pathlib import Path
from typing import List

import pytest

from scopelog import Config, Handler, Logger, LogLevel, set_logger


class CollectingHandler(Handler):
    """Handler that keeps every written line in memory."""

    def __init__(self):
        self.lines: List[str] = []
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        with self._lock:
            self.lines.append(line)

    def stripped(self) -> List[str]:
        return [line.strip() for line in self.lines]


def indent_of(line: str) -> int:
    """Number of leading spaces on a line."""
    return len(line) - len(line.lstrip(" "))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def collector():
    """An in-memory handler."""
    return CollectingHandler()


@pytest.fixture
def make_logger(collector):
    """Factory for loggers that write to the shared collector."""
    def _make(**config_kwargs) -> Logger:
        config_kwargs.setdefault("log_level", LogLevel.TRACE)
        return Logger(Config(**config_kwargs), handlers=[collector])
    return _make


@pytest.fixture
def log(make_logger):
    """Logger at TRACE with default indentation, writing to the collector."""
    return make_logger()


@pytest.fixture(autouse=True)
def root_logger(collector):
    """Replace the root logger with a collecting one for each test."""
    fresh = Logger(Config(), handlers=[collector])
    previous = set_logger(fresh)
    yield fresh
    set_logger(previous)


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove SCOPELOG_* variables so settings tests see only what they set."""
    for var in list(os.environ):
        if var.upper().startswith("SCOPELOG_"):
            monkeypatch.delenv(var)
