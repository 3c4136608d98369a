"""
Shared test fixtures and configuration.
"""

import shutil
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from shotit.adapters.mock import MockRunner


@pytest.fixture
def mock_runner() -> MockRunner:
    """A runner that records commands and never spawns anything."""
    return MockRunner()


@pytest.fixture
def on_path(monkeypatch) -> set[str]:
    """Control which binaries ``shutil.which`` resolves.

    Tests add names to the returned set; everything else is absent.
    """
    present: set[str] = set()

    def fake_which(name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in present else None

    monkeypatch.setattr(shutil, "which", fake_which)
    return present


@pytest.fixture
def no_os_signals(monkeypatch, tmp_path: Path) -> None:
    """Make every OS probe come back negative."""
    monkeypatch.delenv("SHOTIT_OS", raising=False)
    monkeypatch.delenv("OS", raising=False)
    monkeypatch.setattr(
        "shotit.core.detection.environment.LINUX_MARKER", str(tmp_path / "no-os-release")
    )
    monkeypatch.setattr(
        "shotit.core.detection.environment.MACOS_MARKER", str(tmp_path / "no-plist")
    )


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text (dedented) to a temp tools.yaml and return its path."""

    def _write(content: str, name: str = "tools.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path

    return _write
