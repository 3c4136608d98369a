"""
Receipt model — what running one command string produced.

Runners and the executor hand back Receipts instead of raising, so the
planner can decide per entity whether a failure aborts (installs) or
is only counted (tools, wordlists).
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ReceiptStatus(StrEnum):
    OK = "ok"
    SKIPPED = "skipped"   # dry-run: decided but never spawned
    FAILED = "failed"


class ExecutionErrorKind(StrEnum):
    """Why a command failed."""

    EMPTY_COMMAND = "empty_command"
    PROCESS_FAILED = "process_failed"


class Receipt(BaseModel):
    """Outcome of one command string handed to a runner."""

    runner: str
    command: str
    status: ReceiptStatus = ReceiptStatus.OK

    started_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    duration_ms: int = 0

    # Captured text, or the skip reason for dry-run receipts. Real runs
    # inherit the terminal, so this is normally empty.
    output: str = ""
    error: str | None = None
    error_kind: ExecutionErrorKind | None = None
    return_code: int | None = None   # None when no process ran

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is ReceiptStatus.OK

    @property
    def failed(self) -> bool:
        return self.status is ReceiptStatus.FAILED

    @property
    def skipped(self) -> bool:
        return self.status is ReceiptStatus.SKIPPED

    @classmethod
    def success(cls, runner: str, command: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(runner=runner, command=command, output=output, **kwargs)

    @classmethod
    def failure(
        cls,
        runner: str,
        command: str,
        error: str,
        error_kind: ExecutionErrorKind = ExecutionErrorKind.PROCESS_FAILED,
        **kwargs: Any,
    ) -> Receipt:
        """A failed command; ``error`` is the message shown after ``Error:``."""
        return cls(
            runner=runner,
            command=command,
            status=ReceiptStatus.FAILED,
            error=error,
            error_kind=error_kind,
            **kwargs,
        )

    @classmethod
    def skip(cls, runner: str, command: str, reason: str = "", **kwargs: Any) -> Receipt:
        return cls(
            runner=runner,
            command=command,
            status=ReceiptStatus.SKIPPED,
            output=reason,
            **kwargs,
        )
