"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from gof_catalog.creational.singleton import Singleton
from gof_catalog.harness import OutputSink, ScenarioRegistry
from gof_catalog.scenarios import build_default_registry


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for config files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sink() -> OutputSink:
    """A fresh output sink."""
    return OutputSink("test")


@pytest.fixture
def registry() -> ScenarioRegistry:
    """Registry with every built-in scenario."""
    return build_default_registry()


@pytest.fixture(autouse=True)
def reset_singleton():
    """Give every test a process without a singleton instance."""
    Singleton.reset()
    yield
    Singleton.reset()
