"""
Shell command runner — hand command text to the system shell.

Commands are written by the user as shell text (pipes, redirection,
globs, ``&&``), so they go through the shell verbatim. The child
inherits our stdin/stdout/stderr: output streams live, and
interactive prompts (sudo passwords) work. Nothing is captured and
there is no timeout.

When stdout carries machine-readable output (``--json``), the child's
stdout is pointed at another stream, usually stderr, with ``stdout=``.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import IO, Any

from shotit.adapters.base import CommandRunner
from shotit.core.models.action import ExecutionErrorKind, Receipt

logger = logging.getLogger(__name__)


class ShellRunner(CommandRunner):
    """Run commands through the system shell with inherited stdio.

    Args:
        stdout: Where the child's stdout goes: a file descriptor or
            file object. ``None`` (default) inherits ours.
    """

    def __init__(self, stdout: int | IO[Any] | None = None):
        self.stdout = stdout

    @property
    def name(self) -> str:
        return "shell"

    def run(self, command: str) -> Receipt:
        logger.debug("Executing: %s", command)
        start = time.monotonic()

        try:
            result = subprocess.run(command, shell=True, check=False, stdout=self.stdout)
        except OSError as e:
            return Receipt.failure(
                runner=self.name,
                command=command,
                error=f"failed to start shell: {e}",
                error_kind=ExecutionErrorKind.PROCESS_FAILED,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode == 0:
            return Receipt.success(
                runner=self.name,
                command=command,
                duration_ms=elapsed_ms,
                return_code=0,
            )

        logger.debug("Command exited with %d: %s", result.returncode, command)
        return Receipt.failure(
            runner=self.name,
            command=command,
            error=f"exit status {result.returncode}",
            error_kind=ExecutionErrorKind.PROCESS_FAILED,
            duration_ms=elapsed_ms,
            return_code=result.returncode,
        )
