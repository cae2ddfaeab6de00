"""Shared fixtures for the doccover test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

PROJECT_ROOT = Path(__file__).parent.parent
SAMPLE_MODULES = PROJECT_ROOT / "test-samples" / "modules"


@pytest.fixture(autouse=True)
def sample_modules(monkeypatch):
    """Put the sample modules on sys.path and return their directory."""
    monkeypatch.syspath_prepend(str(SAMPLE_MODULES))
    return SAMPLE_MODULES
