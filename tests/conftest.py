"""Shared fixtures for tsconfig-loader tests."""

from __future__ import annotations

import uuid
from pathlib import Path

import pytest


@pytest.fixture
def marker() -> str:
    """A config filename that cannot exist anywhere above tmp_path."""
    return f"tsconfig.{uuid.uuid4().hex}.json"


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    """tmp_path/a/b/c, created empty."""
    path = tmp_path / "a" / "b" / "c"
    path.mkdir(parents=True)
    return path
