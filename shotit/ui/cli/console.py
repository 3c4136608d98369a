"""
Console reporter — renders planner progress as coloured text.

Green is success, red is failure, yellow is informational, cyan marks
names and commands are dimmed. Colour is cosmetic only; click strips
it when stdout is not a terminal.

``click.echo`` flushes after every write, which keeps our lines in
order with the output of the commands we spawn (they write straight
to the inherited file descriptors).
"""

from __future__ import annotations

import click

from shotit.core.engine.planner import EntityKind, EntityOutcome, ExecutionReport
from shotit.core.engine.reporting import Reporter
from shotit.core.models.action import Receipt
from shotit.core.models.config import Config, Install, ManagerCommands, Tool

_INDENT = "  "


class ConsoleReporter(Reporter):
    """Line-oriented progress on stdout."""

    def run_started(self, config: Config, dry_run: bool) -> None:
        if dry_run:
            click.secho("dry run mode - commands will not be executed", fg="yellow")
            click.echo()

    def section_started(self, kind: EntityKind, config: Config) -> None:
        click.secho(f"executing {kind.section}: ", fg="green", nl=False)
        click.echo(config.name)
        click.echo()

    def entity_started(self, kind: EntityKind, entity: Install | Tool) -> None:
        if kind == EntityKind.INSTALL:
            click.secho(f"[{entity.name}]", fg="cyan", nl=False)
            click.echo(f" {entity.description}" if entity.description else "")
            return
        click.echo("[", nl=False)
        click.secho(entity.name, fg="cyan", nl=False)
        click.echo(f"] {entity.description}")

    def skipped_by_name(self, kind: EntityKind, entity: Install | Tool) -> None:
        click.echo(_INDENT, nl=False)
        click.secho(f"skipping - {entity.name} specified in --st", fg="yellow")

    def already_available(
        self,
        kind: EntityKind,
        entity: Tool,
        signal: str,
        signal_type: str,
        skip_available: bool,
    ) -> None:
        click.echo(_INDENT, nl=False)
        if skip_available:
            click.secho(f"skipping - {signal} already available", fg="yellow")
        elif signal_type == "path":
            click.secho(f"already exists - {signal} found", fg="green")
        else:
            click.secho(f"already installed - {signal} found", fg="green")

    def condition_not_met(self, kind: EntityKind, entity: Tool, condition: str) -> None:
        click.echo(_INDENT, nl=False)
        click.secho(f"skipping - condition not met: {condition}", fg="yellow")

    def manager_selected(self, install: Install, manager: ManagerCommands) -> None:
        click.echo(_INDENT, nl=False)
        click.secho(f"using {manager.name}", fg="yellow")

    def no_package_manager(self, install: Install) -> None:
        click.echo(_INDENT, nl=False)
        click.secho("no compatible package manager found", fg="yellow")

    def command_started(self, command: str) -> None:
        click.echo(_INDENT, nl=False)
        click.secho(f"$ {command}", dim=True)

    def command_finished(self, receipt: Receipt) -> None:
        if receipt.failed:
            click.echo(_INDENT, nl=False)
            click.secho(f"Error: {receipt.error}", fg="red")

    def fallback_started(self, command: str) -> None:
        click.echo(_INDENT, nl=False)
        click.secho(f"$ {command}", dim=True, nl=False)

    def fallback_finished(self, receipt: Receipt) -> None:
        if receipt.ok:
            click.echo(" ", nl=False)
            click.secho("(success)", fg="green")
        elif receipt.failed:
            click.echo(" ", nl=False)
            click.secho("(failed)", fg="red")
        else:
            click.echo()

    def fallback_exhausted(self, alternatives: list[str]) -> None:
        click.echo(_INDENT, nl=False)
        click.secho("all fallback commands failed", fg="red")

    def entity_finished(self, outcome: EntityOutcome) -> None:
        click.echo()

    def section_finished(self, kind: EntityKind, dry_run: bool) -> None:
        if kind == EntityKind.INSTALL:
            return
        if dry_run:
            click.secho("dry run completed - no commands were executed", fg="yellow")
        elif kind == EntityKind.WORDLIST:
            click.secho("wordlists installation completed", fg="green")
        else:
            click.secho("installation completed", fg="green")
        click.echo()

    def run_finished(self, report: ExecutionReport) -> None:
        if report.total == 0:
            return
        click.secho(f"{report.executed} executed", fg="green", nl=False)
        click.echo(", ", nl=False)
        click.secho(f"{report.skipped} skipped", fg="yellow", nl=False)
        click.echo(", ", nl=False)
        color = "red" if report.failed else "green"
        click.secho(f"{report.failed} with failures", fg=color)
