"""Shared test fixtures for chronicle tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chronicle.models import ContentState
from chronicle.services import ContentService, MemoryStore


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def state() -> ContentState:
    """Create an empty content state."""
    return ContentState()


@pytest.fixture
def store() -> MemoryStore:
    """Create an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def service(store: MemoryStore) -> ContentService:
    """Create a content service over the in-memory store."""
    return ContentService(store)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Create an initialized .chronicle workspace.

    Changes cwd to the workspace root for the duration of the test.
    """
    monkeypatch.delenv("CHRONICLE_DIR", raising=False)
    chronicle_dir = tmp_path / ".chronicle"
    chronicle_dir.mkdir()
    (chronicle_dir / "content").mkdir()

    config = """[project]
name = "test-project"

[publish]
default_publisher = "tester"
"""
    (chronicle_dir / "config.toml").write_text(config)

    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def empty_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Change cwd to a directory with no workspace above it."""
    monkeypatch.delenv("CHRONICLE_DIR", raising=False)
    root = tmp_path / "plain"
    root.mkdir()
    original_cwd = os.getcwd()
    os.chdir(root)
    try:
        yield root
    finally:
        os.chdir(original_cwd)
