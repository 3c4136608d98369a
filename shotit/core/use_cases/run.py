"""
Run use case — set up everything a configuration declares.

This is the top-level orchestrator: it loads the config, builds a
planner around a runner and a reporter, and walks installs, tools and
wordlists. The full vertical slice from a YAML file to executed
commands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from shotit.adapters.base import CommandRunner
from shotit.core.config.loader import ConfigLoadError, load_config
from shotit.core.engine.planner import ExecutionReport, Planner
from shotit.core.engine.reporting import Reporter
from shotit.core.models.config import Config

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Result of running a configuration."""

    report: ExecutionReport | None = None
    config: Config | None = None
    config_path: Path | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["config_name"] = self.config.name if self.config else ""
        result["config_path"] = str(self.config_path)
        if self.report:
            result["report"] = self.report.to_dict()
        return result


def run_setup(
    config_path: Path,
    dry_run: bool = False,
    skip_available: bool = False,
    skip_names: Iterable[str] = (),
    reporter: Reporter | None = None,
    runner: CommandRunner | None = None,
) -> RunResult:
    """Execute every install, tool and wordlist in a configuration.

    Args:
        config_path: Path to the tools YAML.
        dry_run: If True, decide and report but spawn nothing.
        skip_available: Report available binaries/paths as skipped.
        skip_names: Entity names to skip (exact match).
        reporter: Progress observer.
        runner: Optional pre-configured runner (default: the shell).

    Returns:
        RunResult with the execution report, or ``error`` set if the
        configuration could not be loaded (nothing ran in that case).
    """
    result = RunResult(config_path=config_path)
    skip_names = list(skip_names)

    # ── Load config ──────────────────────────────────────────────
    try:
        config = load_config(config_path)
    except ConfigLoadError as e:
        result.error = str(e)
        return result
    result.config = config

    # ── Set up runner ────────────────────────────────────────────
    if runner is None:
        from shotit.adapters.shell.command import ShellRunner

        runner = ShellRunner()

    # ── Execute ──────────────────────────────────────────────────
    planner = Planner(
        runner=runner,
        reporter=reporter,
        dry_run=dry_run,
        skip_available=skip_available,
        skip_names=skip_names,
    )
    logger.debug(
        "Running %s (dry_run=%s, skip_available=%s, skip=%s)",
        config_path,
        dry_run,
        skip_available,
        skip_names,
    )
    result.report = planner.run(config)
    return result
