"""
PyTest Configuration for reflectionlab Tests

Provides fixtures, markers, and test setup.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def target():
    """Target object with number 1."""
    from reflectionlab.model import TargetObject
    return TargetObject(1)


@pytest.fixture
def small_config():
    """Benchmark config with few iterations."""
    from reflectionlab.benchmark import BenchmarkConfig
    return BenchmarkConfig(times=200, warmup_calls=1)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove REFLECTIONLAB_* variables from the environment."""
    import os
    for key in list(os.environ):
        if key.startswith("REFLECTIONLAB_"):
            monkeypatch.delenv(key)
    return monkeypatch
