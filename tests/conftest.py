"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csvgrid...' works, and
isolates every test from CSVGRID_* environment variables.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvgrid.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop CSVGRID_* variables and the cached settings around each test."""
    for name in (
        "CSVGRID_FIELD_SEPARATOR",
        "CSVGRID_COMMENT_PREFIX",
        "CSVGRID_QUOTE_FIELDS",
        "CSVGRID_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
