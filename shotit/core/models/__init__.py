"""
Domain models — Pydantic types for shotit.

All models are re-exported here for convenient access:

    from shotit.core.models import Config, Tool, Wordlist, Command, Receipt
"""

from shotit.core.models.action import ExecutionErrorKind, Receipt, ReceiptStatus
from shotit.core.models.config import (
    Command,
    Config,
    Install,
    ManagerCommands,
    Tool,
    Wordlist,
)

__all__ = [
    # config.py
    "Command",
    "Config",
    # action.py
    "ExecutionErrorKind",
    "Install",
    "ManagerCommands",
    "Receipt",
    "ReceiptStatus",
    "Tool",
    "Wordlist",
]
