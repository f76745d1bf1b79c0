"""Shared fixtures for unit tests."""

import pytest

from tenet.config import TenetConfig
from tenet.reports.memory import MemoryReporter


@pytest.fixture
def reporter() -> MemoryReporter:
    """Provide a reporter that records every call."""
    return MemoryReporter()


@pytest.fixture
def config() -> TenetConfig:
    """Default configuration, independent of any pyproject.toml or environment."""
    return TenetConfig()


@pytest.fixture
def debug_config() -> TenetConfig:
    return TenetConfig(debug=True)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.delenv("TENET_DEBUG", raising=False)
    monkeypatch.delenv("TENET_REPORTER", raising=False)
