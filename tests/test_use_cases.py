"""
Tests for use cases — run_setup and the inventory probes.
"""

from pathlib import Path

from shotit.adapters.mock import MockRunner
from shotit.core.engine.planner import Decision
from shotit.core.use_cases.inventory import InventoryEntry, check_inventory
from shotit.core.use_cases.run import run_setup


class TestRunSetup:
    def test_runs_with_given_runner(self, write_config, on_path):
        path = write_config("""\
            name: r
            tools:
              - name: ffuf
                commands:
                  - cmd: go install ffuf
        """)
        runner = MockRunner()
        result = run_setup(path, runner=runner)
        assert result.error is None
        assert result.config.name == "r"
        assert runner.call_log == ["go install ffuf"]
        assert result.report.outcomes[0].decision == Decision.EXECUTED

    def test_skip_names_accepts_any_iterable(self, write_config, on_path):
        path = write_config("""\
            name: r
            tools:
              - name: ffuf
                commands:
                  - cmd: go install ffuf
        """)
        runner = MockRunner()
        result = run_setup(path, skip_names=(n for n in ["ffuf"]), runner=runner)
        assert result.report.outcomes[0].decision == Decision.SKIPPED_BY_NAME
        assert runner.call_count == 0

    def test_config_error(self, tmp_path: Path):
        runner = MockRunner()
        result = run_setup(tmp_path / "missing.yaml", runner=runner)
        assert result.error is not None
        assert result.report is None
        assert result.to_dict() == {"error": result.error}
        assert runner.call_count == 0

    def test_to_dict(self, write_config, on_path):
        path = write_config("name: empty\n")
        result = run_setup(path, runner=MockRunner())
        data = result.to_dict()
        assert data["config_name"] == "empty"
        assert data["report"]["total"] == 0


class TestInventory:
    def test_entries(self, write_config, on_path, tmp_path: Path):
        on_path.add("nmap")
        path = write_config(f"""\
            name: inv
            installs:
              - name: base
                commands:
                  apt: [apt-get install git]
            tools:
              - name: nmap
                binary: nmap
              - name: ffuf
                binary: ffuf
              - name: gf
            wordlists:
              - name: both
                binary: not-there
                path: {tmp_path}
              - name: dir
                path: {tmp_path}
        """)
        result = check_inventory(path)
        assert result.error is None
        assert [e.name for e in result.installs] == ["base"]
        assert [e.status for e in result.tools] == ["available", "unavailable", "unspecified"]

        both = result.wordlists[0]
        assert both.signal_type == "binary"
        assert both.status == "unavailable"
        assert result.wordlists[1].signal_type == "path"
        assert result.wordlists[1].present is True

        assert result.available == 2
        assert result.unavailable == 2
        assert result.unspecified == 1

    def test_env_path(self, write_config, on_path, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "common.txt").write_text("")
        path = write_config("""\
            name: inv
            wordlists:
              - name: common
                path: $HOME/common.txt
        """)
        result = check_inventory(path)
        assert result.wordlists[0].present is True
        assert result.wordlists[0].signal == "$HOME/common.txt"

    def test_config_error(self, tmp_path: Path):
        result = check_inventory(tmp_path / "missing.yaml")
        assert result.error
        assert result.to_dict() == {"error": result.error}

    def test_entry_status(self):
        assert InventoryEntry(kind="tool", name="x").status == "unspecified"
        assert InventoryEntry(kind="tool", name="x", present=True).status == "available"
        assert InventoryEntry(kind="tool", name="x", present=False).status == "unavailable"
