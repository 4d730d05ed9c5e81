"""Shared fixtures for claude-tui tests."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

import pytest

from claude_tui.config import ClaudeTuiConfig
from claude_tui.models import Project


@pytest.fixture
def make_project() -> Callable[..., Project]:
    """Factory for Project records with sensible defaults."""

    def _make(
        name: str,
        last_modified: Optional[float] = None,
        source_group: str = "app",
        **kwargs,
    ) -> Project:
        when = (
            datetime.fromtimestamp(last_modified, tz=timezone.utc)
            if last_modified is not None
            else None
        )
        return Project(
            name=name,
            path=Path("/projects") / source_group / name,
            source_group=source_group,
            last_modified=when,
            **kwargs,
        )

    return _make


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """A fake home directory with both default roots and the docs store."""
    config = ClaudeTuiConfig()
    for scan_dir in config.scan_dirs:
        (tmp_path / scan_dir).mkdir(parents=True)
    (tmp_path / config.docs_dir).mkdir(parents=True)
    return tmp_path


@pytest.fixture
def config(home: Path) -> ClaudeTuiConfig:
    """Default configuration with a predictable opener."""
    return ClaudeTuiConfig(opener_command="open")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temp location for every test."""
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("CLAUDE_TUI_CONFIG", str(path))
    return path
