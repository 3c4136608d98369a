"""
Tests for configuration loading — YAML parsing and validation.
"""

from pathlib import Path

import pytest

from shotit.core.config.loader import ConfigLoadError, load_config


class TestLoadConfig:
    def test_full_config(self, write_config):
        path = write_config("""\
            name: recon
            description: "Recon toolkit"
            installs:
              - name: base
                description: compilers
                commands:
                  brew:
                    - brew install go
                  apt:
                    - sudo apt-get update
                    - sudo apt-get install -y golang
            tools:
              - name: ffuf
                description: fuzzer
                binary: ffuf
                condition: go
                commands:
                  - cmd: go install github.com/ffuf/ffuf/v2@latest
                  - or:
                      - echo one
                      - echo two
            wordlists:
              - name: common
                path: $HOME/wordlists/common.txt
                commands:
                  - cmd: mkdir -p $HOME/wordlists
        """)
        config = load_config(path)

        assert config.name == "recon"
        assert config.description == "Recon toolkit"
        assert config.installs[0].managers == ["brew", "apt"]
        assert config.installs[0].commands[1].commands == [
            "sudo apt-get update",
            "sudo apt-get install -y golang",
        ]

        ffuf = config.tools[0]
        assert ffuf.binary == "ffuf"
        assert ffuf.condition == "go"
        assert ffuf.commands[0].cmd.startswith("go install")
        assert ffuf.commands[1].alternatives == ["echo one", "echo two"]

        assert config.wordlists[0].path == "$HOME/wordlists/common.txt"

    def test_relative_path(self, write_config, tmp_path: Path, monkeypatch):
        write_config("name: rel\n")
        monkeypatch.chdir(tmp_path)
        assert load_config("tools.yaml").name == "rel"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_directory_is_not_a_config(self, tmp_path: Path):
        with pytest.raises(ConfigLoadError):
            load_config(tmp_path)

    def test_invalid_yaml(self, write_config):
        path = write_config("name: [unclosed\n")
        with pytest.raises(ConfigLoadError, match="failed to parse YAML"):
            load_config(path)

    def test_empty_file(self, write_config):
        path = write_config("")
        with pytest.raises(ConfigLoadError, match="expected a YAML mapping"):
            load_config(path)

    def test_list_root(self, write_config):
        path = write_config("- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="got list"):
            load_config(path)

    def test_command_with_both_variants(self, write_config):
        path = write_config("""\
            name: bad
            tools:
              - name: x
                commands:
                  - cmd: echo a
                    or: [echo b]
        """)
        with pytest.raises(ConfigLoadError, match="invalid configuration"):
            load_config(path)

    def test_error_is_chained(self, write_config):
        path = write_config("name: [unclosed\n")
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(path)
        assert exc_info.value.__cause__ is not None

    def test_numeric_and_boolean_scalars(self, write_config):
        path = write_config("""\
            name: 2024
            description:
            tools:
              - name: 1.0
                binary: 42
                commands:
                  - cmd: true
                  - or: [false, 'true']
            wordlists:
              - name: dated
                path: 2024-01-01
        """)
        config = load_config(path)
        assert config.name == "2024"
        assert config.description == ""
        assert config.tools[0].name == "1.0"
        assert config.tools[0].binary == "42"
        assert config.tools[0].commands[0].cmd == "true"
        assert config.tools[0].commands[1].alternatives == ["false", "true"]
        assert config.wordlists[0].path == "2024-01-01"
