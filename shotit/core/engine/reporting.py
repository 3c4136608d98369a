"""
Reporting hooks — how the planner tells the outside world what it decided.

The planner calls one hook per decision, in order, as it walks the
configuration. The base class does nothing, so a planner built
without a reporter runs silently; the console renderer lives in
``shotit.ui.cli.console``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shotit.core.engine.planner import EntityKind, EntityOutcome, ExecutionReport
    from shotit.core.models.action import Receipt
    from shotit.core.models.config import Config, Install, ManagerCommands, Tool


class Reporter:
    """Observer for planner progress. Every hook is a no-op by default."""

    def run_started(self, config: Config, dry_run: bool) -> None:
        pass

    def section_started(self, kind: EntityKind, config: Config) -> None:
        pass

    def entity_started(self, kind: EntityKind, entity: Install | Tool) -> None:
        pass

    def skipped_by_name(self, kind: EntityKind, entity: Install | Tool) -> None:
        pass

    def already_available(
        self,
        kind: EntityKind,
        entity: Tool,
        signal: str,
        signal_type: str,
        skip_available: bool,
    ) -> None:
        """``signal_type`` is ``"binary"`` or ``"path"``."""

    def condition_not_met(self, kind: EntityKind, entity: Tool, condition: str) -> None:
        pass

    def manager_selected(self, install: Install, manager: ManagerCommands) -> None:
        pass

    def no_package_manager(self, install: Install) -> None:
        pass

    def command_started(self, command: str) -> None:
        pass

    def command_finished(self, receipt: Receipt) -> None:
        pass

    def fallback_started(self, command: str) -> None:
        pass

    def fallback_finished(self, receipt: Receipt) -> None:
        pass

    def fallback_exhausted(self, alternatives: list[str]) -> None:
        pass

    def entity_finished(self, outcome: EntityOutcome) -> None:
        pass

    def section_finished(self, kind: EntityKind, dry_run: bool) -> None:
        pass

    def run_finished(self, report: ExecutionReport) -> None:
        pass
