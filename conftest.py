"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from burmese_numerals.config import SHORTHAND_ENV_VAR  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep a developer's shell or .env from switching tests into shorthand mode."""
    monkeypatch.delenv(SHORTHAND_ENV_VAR, raising=False)
    yield
