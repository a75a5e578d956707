"""Shared pytest fixtures and test helpers for wirectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from wirectl.config.settings import WireSettings
from wirectl.domain.store import RecordStore
from wirectl.infrastructure.workspace import Workspace


class FakeRenderer:
    """Renderer double that records calls and optionally fails."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[Path, Path, str]] = []
        self.error = error

    def __call__(self, source: Path, target: Path, fmt: str) -> None:
        self.calls.append((source, target, fmt))
        if self.error is not None:
            raise self.error
        target.write_text("<svg/>", encoding="utf-8")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workspace_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary workspace directory, isolated from any WIRECTL_* environment."""
    for var in ("WIRECTL_CONFIG", "WIRECTL_STORAGE__DATA_FILE", "WIRECTL_RENDERER__ENABLED"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def workspace(workspace_root: Path, fake_renderer: FakeRenderer) -> Workspace:
    """Workspace on a temp directory with a recording renderer."""
    settings = WireSettings.from_cli(workspace_root=workspace_root)
    return Workspace(settings, renderer=fake_renderer)


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def _isolated_workspace(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp workspace and switch the Graphviz renderer off.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes. Tests that need the path can request ``tmp_path``
    directly (pytest deduplicates — it's the same directory).
    """
    monkeypatch.chdir(workspace_root)
    monkeypatch.setenv("WIRECTL_RENDERER__ENABLED", "false")


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Generator[None]:
    """Drop handlers the CLI installs so later tests never log to a closed runner stream."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
