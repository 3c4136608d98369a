"""
Engine planner — the central execution loop.

Walks the configuration in three passes (installs, then tools, then
wordlists) and decides, per entity, whether to run anything:

    skip list → already available → condition → execute

Installs have no availability or condition checks; instead the first
package manager present on the system picks the command list.

Failure policy differs by pass. Within an install, the first failing
command aborts the rest of that install's list. Within a tool or
wordlist, a failing command is reported and the next command still
runs. Nothing a command does ever stops the run as a whole.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from shotit.adapters.base import CommandRunner
from shotit.core.detection.condition import evaluate_condition
from shotit.core.detection.environment import binary_exists, path_exists
from shotit.core.engine.reporting import Reporter
from shotit.core.execution.executor import execute_command
from shotit.core.models.action import Receipt
from shotit.core.models.config import Config, Install, Tool, Wordlist
from shotit.core.resolver.package_manager import select_manager

logger = logging.getLogger(__name__)


class EntityKind(StrEnum):
    """Which pass an entity belongs to."""

    INSTALL = "install"
    TOOL = "tool"
    WORDLIST = "wordlist"

    @property
    def section(self) -> str:
        return f"{self.value}s"


class Decision(StrEnum):
    """Terminal state of one entity."""

    SKIPPED_BY_NAME = "skipped_by_name"
    SKIPPED_AVAILABLE = "skipped_available"
    SKIPPED_CONDITION = "skipped_condition"
    NO_PACKAGE_MANAGER = "no_package_manager"
    EXECUTED = "executed"


@dataclass
class EntityOutcome:
    """What happened to one install, tool or wordlist."""

    kind: EntityKind
    name: str
    decision: Decision
    manager: str | None = None
    signal: str | None = None
    condition: str | None = None
    receipts: list[Receipt] = field(default_factory=list)
    failed_steps: int = 0

    @property
    def executed(self) -> bool:
        return self.decision == Decision.EXECUTED

    @property
    def ok(self) -> bool:
        return self.failed_steps == 0

    def to_dict(self) -> dict:
        return {
            "kind": str(self.kind),
            "name": self.name,
            "decision": str(self.decision),
            "manager": self.manager,
            "signal": self.signal,
            "condition": self.condition,
            "failed_steps": self.failed_steps,
            "receipts": [r.model_dump(mode="json") for r in self.receipts],
        }


@dataclass
class ExecutionReport:
    """Result of walking a whole configuration."""

    config_name: str = ""
    dry_run: bool = False
    outcomes: list[EntityOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def executed(self) -> int:
        return sum(1 for o in self.outcomes if o.executed)

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if not o.executed)

    @property
    def failed(self) -> int:
        """Entities with at least one failed step."""
        return sum(1 for o in self.outcomes if not o.ok)

    @property
    def commands_run(self) -> int:
        """Commands that actually reached a runner."""
        return sum(
            1
            for o in self.outcomes
            for r in o.receipts
            if not r.skipped and r.return_code is not None
        )

    @property
    def status(self) -> str:
        if self.failed == 0:
            return "ok"
        if self.executed > self.failed:
            return "partial"
        return "failed"

    def to_dict(self) -> dict:
        return {
            "config": self.config_name,
            "dry_run": self.dry_run,
            "status": self.status,
            "total": self.total,
            "executed": self.executed,
            "skipped": self.skipped,
            "failed": self.failed,
            "commands_run": self.commands_run,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


class Planner:
    """Decide and execute, entity by entity, in declared order.

    Args:
        runner: Where commands go when they really run.
        reporter: Progress observer (silent if omitted).
        dry_run: Walk every decision but spawn nothing.
        skip_available: Word an available binary/path as "skipping"
            rather than "already installed". Either way nothing runs.
        skip_names: Entity names to skip outright (exact,
            case-sensitive match).
    """

    def __init__(
        self,
        runner: CommandRunner,
        reporter: Reporter | None = None,
        dry_run: bool = False,
        skip_available: bool = False,
        skip_names: Iterable[str] = (),
    ):
        self.runner = runner
        self.reporter = reporter or Reporter()
        self.dry_run = dry_run
        self.skip_available = skip_available
        self.skip_names = frozenset(skip_names)

    def run(self, config: Config) -> ExecutionReport:
        """Run all three passes and return the combined report."""
        report = ExecutionReport(config_name=config.name, dry_run=self.dry_run)
        self.reporter.run_started(config, self.dry_run)

        report.outcomes.extend(self.execute_installs(config))
        report.outcomes.extend(self.execute_tools(config))
        report.outcomes.extend(self.execute_wordlists(config))

        logger.info(
            "run finished: %d executed, %d skipped, %d with failures",
            report.executed,
            report.skipped,
            report.failed,
        )
        self.reporter.run_finished(report)
        return report

    # ── Installs ────────────────────────────────────────────────

    def execute_installs(self, config: Config) -> list[EntityOutcome]:
        if not config.installs:
            return []

        self.reporter.section_started(EntityKind.INSTALL, config)
        outcomes = [self._install(install) for install in config.installs]
        self.reporter.section_finished(EntityKind.INSTALL, self.dry_run)
        return outcomes

    def _install(self, install: Install) -> EntityOutcome:
        self.reporter.entity_started(EntityKind.INSTALL, install)

        if install.name in self.skip_names:
            logger.info("install %s: skipped by name", install.name)
            outcome = EntityOutcome(
                kind=EntityKind.INSTALL,
                name=install.name,
                decision=Decision.SKIPPED_BY_NAME,
            )
            self.reporter.skipped_by_name(EntityKind.INSTALL, install)
            self.reporter.entity_finished(outcome)
            return outcome

        chosen = select_manager(install.commands)
        if chosen is None:
            logger.info("install %s: no compatible package manager", install.name)
            outcome = EntityOutcome(
                kind=EntityKind.INSTALL,
                name=install.name,
                decision=Decision.NO_PACKAGE_MANAGER,
            )
            self.reporter.no_package_manager(install)
            self.reporter.entity_finished(outcome)
            return outcome

        outcome = EntityOutcome(
            kind=EntityKind.INSTALL,
            name=install.name,
            decision=Decision.EXECUTED,
            manager=chosen.name,
        )
        self.reporter.manager_selected(install, chosen)

        for command in chosen.commands:
            receipt = self._run_single(command, outcome)
            if receipt.failed:
                logger.info("install %s: aborting after failed command", install.name)
                break

        self.reporter.entity_finished(outcome)
        return outcome

    # ── Tools / wordlists ───────────────────────────────────────

    def execute_tools(self, config: Config) -> list[EntityOutcome]:
        return self._execute_pass(EntityKind.TOOL, config.tools, config)

    def execute_wordlists(self, config: Config) -> list[EntityOutcome]:
        return self._execute_pass(EntityKind.WORDLIST, config.wordlists, config)

    def _execute_pass(
        self,
        kind: EntityKind,
        entities: list[Tool] | list[Wordlist],
        config: Config,
    ) -> list[EntityOutcome]:
        if not entities:
            return []

        self.reporter.section_started(kind, config)
        outcomes = [self._entity(kind, entity) for entity in entities]
        self.reporter.section_finished(kind, self.dry_run)
        return outcomes

    def _entity(self, kind: EntityKind, entity: Tool) -> EntityOutcome:
        self.reporter.entity_started(kind, entity)
        outcome = EntityOutcome(kind=kind, name=entity.name, decision=Decision.EXECUTED)

        if entity.name in self.skip_names:
            outcome.decision = Decision.SKIPPED_BY_NAME
            logger.info("%s %s: skipped by name", kind, entity.name)
            self.reporter.skipped_by_name(kind, entity)
            self.reporter.entity_finished(outcome)
            return outcome

        available = self._availability(entity)
        if available is not None:
            signal, signal_type = available
            outcome.decision = Decision.SKIPPED_AVAILABLE
            outcome.signal = signal
            logger.info("%s %s: %s %s already present", kind, entity.name, signal_type, signal)
            self.reporter.already_available(
                kind, entity, signal, signal_type, self.skip_available
            )
            self.reporter.entity_finished(outcome)
            return outcome

        if entity.condition is not None and not evaluate_condition(entity.condition):
            outcome.decision = Decision.SKIPPED_CONDITION
            outcome.condition = entity.condition
            logger.info("%s %s: condition %r not met", kind, entity.name, entity.condition)
            self.reporter.condition_not_met(kind, entity, entity.condition)
            self.reporter.entity_finished(outcome)
            return outcome

        for command in entity.commands:
            if command.is_fallback:
                self._run_fallback(command.alternatives or [], outcome)
            else:
                self._run_single(command.cmd or "", outcome)

        self.reporter.entity_finished(outcome)
        return outcome

    @staticmethod
    def _availability(entity: Tool) -> tuple[str, str] | None:
        """The first availability signal that resolves present, if any."""
        if entity.binary and binary_exists(entity.binary):
            return entity.binary, "binary"
        path = getattr(entity, "path", None)
        if path and path_exists(path):
            return path, "path"
        return None

    # ── Command steps ───────────────────────────────────────────

    def _run_single(self, command: str, outcome: EntityOutcome) -> Receipt:
        self.reporter.command_started(command)
        receipt = execute_command(command, self.runner, dry_run=self.dry_run)
        outcome.receipts.append(receipt)
        if receipt.failed:
            outcome.failed_steps += 1
            logger.info("%s %s: command failed: %s", outcome.kind, outcome.name, receipt.error)
        self.reporter.command_finished(receipt)
        return receipt

    def _run_fallback(self, alternatives: list[str], outcome: EntityOutcome) -> bool:
        """Try alternatives in order until one succeeds."""
        receipts: list[Receipt] = []
        for command in alternatives:
            self.reporter.fallback_started(command)
            receipt = execute_command(command, self.runner, dry_run=self.dry_run)
            receipts.append(receipt)
            outcome.receipts.append(receipt)
            self.reporter.fallback_finished(receipt)
            if receipt.ok:
                return True

        if all(r.failed for r in receipts):
            outcome.failed_steps += 1
            logger.info("%s %s: all fallback commands failed", outcome.kind, outcome.name)
            self.reporter.fallback_exhausted(alternatives)
        return False
