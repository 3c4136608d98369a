"""
Execution — single-command executor.

The one gate every command string passes through on its way to a
runner. Blank commands are rejected here and dry-run stops here, so
neither ever reaches a process.
"""

from __future__ import annotations

import logging

from shotit.adapters.base import CommandRunner
from shotit.core.models.action import ExecutionErrorKind, Receipt

logger = logging.getLogger(__name__)


def execute_command(
    command: str,
    runner: CommandRunner,
    dry_run: bool = False,
) -> Receipt:
    """Run one command string through ``runner``.

    Args:
        command: Shell text as written in the configuration.
        runner: Where to run it.
        dry_run: If True, report what would run but spawn nothing.

    Returns:
        A Receipt: ``failed`` with ``empty_command`` for blank text,
        ``skipped`` under dry-run, otherwise whatever the runner returns.
    """
    if not command.strip():
        logger.debug("Refusing to run an empty command")
        return Receipt.failure(
            runner=runner.name,
            command=command,
            error="empty command",
            error_kind=ExecutionErrorKind.EMPTY_COMMAND,
        )

    if dry_run:
        return Receipt.skip(
            runner=runner.name,
            command=command,
            reason=f"[dry-run] would execute: {command}",
            metadata={"dry_run": True},
        )

    return runner.run(command)
