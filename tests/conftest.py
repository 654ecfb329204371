"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def no_real_credentials(monkeypatch):
    """Keep a developer's OPENAI_API_KEY out of the tests."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
