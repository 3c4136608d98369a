"""
Runner base — the protocol contract between the executor and the system.

The executor only talks to the outside world through a CommandRunner,
never by spawning processes itself. Swapping the runner (for the mock)
is how tests exercise the planner without touching the machine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shotit.core.models.action import Receipt


class CommandRunner(ABC):
    """Abstract base class for command runners.

    Runners perform the side effect and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def run(self, command: str) -> Receipt:
        """Run one command string to completion and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
