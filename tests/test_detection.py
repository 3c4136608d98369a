"""
Tests for detection — binary/path probes, OS guesses, conditions,
and package manager selection.
"""

from pathlib import Path

import pytest

from shotit.core.detection.condition import (
    _EVALUATORS,
    ConditionKind,
    evaluate_condition,
    parse_condition,
)
from shotit.core.detection.environment import (
    binary_exists,
    expand_path,
    os_matches,
    path_exists,
)
from shotit.core.models.config import ManagerCommands
from shotit.core.resolver.package_manager import select_manager


class TestBinaryExists:
    def test_present(self, on_path):
        on_path.add("nmap")
        assert binary_exists("nmap")

    def test_absent(self, on_path):
        assert not binary_exists("nmap")

    def test_empty_name(self, on_path):
        on_path.add("")
        assert not binary_exists("")


class TestPathExists:
    def test_file(self, tmp_path: Path):
        f = tmp_path / "common.txt"
        f.write_text("admin\n")
        assert path_exists(str(f))

    def test_directory(self, tmp_path: Path):
        assert path_exists(str(tmp_path))

    def test_missing(self, tmp_path: Path):
        assert not path_exists(str(tmp_path / "missing"))

    def test_env_expansion(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "wordlists").mkdir()
        (tmp_path / "wordlists" / "common.txt").write_text("")
        assert path_exists("$HOME/wordlists/common.txt")
        assert path_exists("${HOME}/wordlists/common.txt")
        assert not path_exists("$HOME/wordlists/big.txt")

    def test_tilde_expansion(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert expand_path("~/x") == str(tmp_path / "x")

    def test_empty(self):
        assert not path_exists("")


class TestOsMatches:
    def test_nothing_matches_without_signals(self, no_os_signals):
        assert not os_matches("linux")
        assert not os_matches("macos")
        assert not os_matches("windows")

    @pytest.mark.parametrize(
        "override,kind",
        [("linux", "linux"), ("darwin", "macos"), ("Windows", "windows")],
    )
    def test_override(self, no_os_signals, monkeypatch, override, kind):
        monkeypatch.setenv("SHOTIT_OS", override)
        assert os_matches(kind)

    def test_override_does_not_leak(self, no_os_signals, monkeypatch):
        monkeypatch.setenv("SHOTIT_OS", "linux")
        assert not os_matches("windows")

    def test_linux_marker(self, no_os_signals, monkeypatch, tmp_path: Path):
        marker = tmp_path / "os-release"
        marker.write_text("ID=debian\n")
        monkeypatch.setattr("shotit.core.detection.environment.LINUX_MARKER", str(marker))
        assert os_matches("linux")

    def test_macos_marker(self, no_os_signals, monkeypatch, tmp_path: Path):
        marker = tmp_path / "SystemVersion.plist"
        marker.write_text("")
        monkeypatch.setattr("shotit.core.detection.environment.MACOS_MARKER", str(marker))
        assert os_matches("macos")

    def test_windows_env(self, no_os_signals, monkeypatch):
        monkeypatch.setenv("OS", "Windows_NT")
        assert os_matches("windows")

    def test_unknown_kind(self, monkeypatch):
        monkeypatch.setenv("SHOTIT_OS", "plan9")
        assert not os_matches("plan9")


class TestCondition:
    def test_parse_os_names(self):
        assert parse_condition("linux").kind == ConditionKind.LINUX
        assert parse_condition("macos").kind == ConditionKind.MACOS
        assert parse_condition("windows").kind == ConditionKind.WINDOWS

    def test_parse_is_exact(self):
        """Only the exact lowercase names are OS conditions."""
        assert parse_condition("Linux").kind == ConditionKind.BINARY
        assert parse_condition("darwin").kind == ConditionKind.BINARY

    def test_parse_binary(self):
        c = parse_condition("go")
        assert c.kind == ConditionKind.BINARY
        assert c.value == "go"

    def test_os_condition(self, no_os_signals, monkeypatch):
        assert not evaluate_condition("linux")
        monkeypatch.setenv("SHOTIT_OS", "linux")
        assert evaluate_condition("linux")

    def test_windows_on_non_windows(self, no_os_signals, on_path):
        on_path.add("windows")
        assert not evaluate_condition("windows")

    def test_binary_condition(self, on_path):
        assert not evaluate_condition("go")
        on_path.add("go")
        assert evaluate_condition("go")

    def test_empty_condition(self, on_path):
        assert not evaluate_condition("")

    def test_every_kind_has_an_evaluator(self):
        assert set(_EVALUATORS) == set(ConditionKind)


class TestSelectManager:
    def _candidates(self) -> list[ManagerCommands]:
        return [
            ManagerCommands(name="pacman", commands=["pacman -S git"]),
            ManagerCommands(name="apt", commands=["apt-get install git"]),
            ManagerCommands(name="brew", commands=["brew install git"]),
        ]

    def test_first_present_wins(self, on_path):
        on_path.update({"apt", "brew"})
        chosen = select_manager(self._candidates())
        assert chosen is not None
        assert chosen.name == "apt"

    def test_declared_order_beats_preference(self, on_path):
        on_path.update({"pacman", "apt"})
        assert select_manager(self._candidates()).name == "pacman"

    def test_none_present(self, on_path):
        assert select_manager(self._candidates()) is None

    def test_empty(self, on_path):
        assert select_manager([]) is None

    def test_unknown_manager_is_a_binary(self, on_path):
        on_path.add("nix-env")
        chosen = select_manager([ManagerCommands(name="nix-env", commands=["nix-env -i git"])])
        assert chosen.commands == ["nix-env -i git"]
