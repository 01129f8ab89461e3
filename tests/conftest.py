"""Root test configuration: environment isolation and cleanup of runtime artifacts"""

import os
import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["dist"]


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Drop WIKIDOC_* variables from the host environment so settings start from defaults."""
    for name in list(os.environ):
        if name.startswith("WIKIDOC_"):
            monkeypatch.delenv(name)


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove export directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)
