"""
Mock runner — test double for command execution.

Records every command it is asked to run without touching the
system. Succeeds by default; specific command strings can be
configured to fail.
"""

from __future__ import annotations

from shotit.adapters.base import CommandRunner
from shotit.core.models.action import ExecutionErrorKind, Receipt


class MockRunner(CommandRunner):
    """Universal mock runner for testing.

    By default, returns success for everything. Can be configured
    with failures per command string.
    """

    def __init__(self, runner_name: str = "mock", default_output: str = "[mock] executed"):
        self._name = runner_name
        self._default_output = default_output
        self._failures: dict[str, int] = {}
        self._call_log: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[str]:
        """Every command string this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times run has been called."""
        return len(self._call_log)

    def set_failure(self, command: str, return_code: int = 1) -> None:
        """Configure a specific command string to fail."""
        self._failures[command] = return_code

    def run(self, command: str) -> Receipt:
        self._call_log.append(command)

        if command in self._failures:
            code = self._failures[command]
            return Receipt.failure(
                runner=self._name,
                command=command,
                error=f"exit status {code}",
                error_kind=ExecutionErrorKind.PROCESS_FAILED,
                return_code=code,
                metadata={"mock": True},
            )

        return Receipt.success(
            runner=self._name,
            command=command,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()
