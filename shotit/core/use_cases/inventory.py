"""
Inventory use cases — list entities and check their availability.

Neither of these runs anything: they load the configuration, probe
binaries and paths, and return a result for the CLI to render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from shotit.core.config.loader import ConfigLoadError, load_config
from shotit.core.detection.environment import binary_exists, path_exists
from shotit.core.models.config import Config, Tool

logger = logging.getLogger(__name__)


@dataclass
class InventoryEntry:
    """One declared entity and the state of its availability signal."""

    kind: str
    name: str
    description: str = ""
    signal: str | None = None
    signal_type: str | None = None   # "binary" | "path" | None
    present: bool | None = None      # None when no signal is declared

    @property
    def status(self) -> str:
        if self.present is None:
            return "unspecified"
        return "available" if self.present else "unavailable"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "name": self.name,
            "description": self.description,
            "signal": self.signal,
            "signal_type": self.signal_type,
            "status": self.status,
        }


@dataclass
class InventoryResult:
    """Everything a configuration declares, with availability."""

    config: Config | None = None
    installs: list[InventoryEntry] = field(default_factory=list)
    tools: list[InventoryEntry] = field(default_factory=list)
    wordlists: list[InventoryEntry] = field(default_factory=list)
    error: str | None = None

    @property
    def entries(self) -> list[InventoryEntry]:
        """Tools and wordlists (installs carry no availability signal)."""
        return self.tools + self.wordlists

    @property
    def available(self) -> int:
        return sum(1 for e in self.entries if e.present is True)

    @property
    def unavailable(self) -> int:
        return sum(1 for e in self.entries if e.present is False)

    @property
    def unspecified(self) -> int:
        return sum(1 for e in self.entries if e.present is None)

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "name": self.config.name if self.config else "",
            "description": self.config.description if self.config else "",
            "installs": [e.to_dict() for e in self.installs],
            "tools": [e.to_dict() for e in self.tools],
            "wordlists": [e.to_dict() for e in self.wordlists],
            "available": self.available,
            "unavailable": self.unavailable,
            "unspecified": self.unspecified,
        }


def _entry(kind: str, entity: Tool) -> InventoryEntry:
    """Build an entry; a declared binary wins over a declared path."""
    entry = InventoryEntry(kind=kind, name=entity.name, description=entity.description)
    path = getattr(entity, "path", None)
    if entity.binary:
        entry.signal, entry.signal_type = entity.binary, "binary"
        entry.present = binary_exists(entity.binary)
    elif path:
        entry.signal, entry.signal_type = path, "path"
        entry.present = path_exists(path)
    return entry


def build_inventory(config: Config) -> InventoryResult:
    """Probe every tool and wordlist of an already-loaded config."""
    result = InventoryResult(config=config)
    result.installs = [
        InventoryEntry(kind="install", name=i.name, description=i.description)
        for i in config.installs
    ]
    result.tools = [_entry("tool", t) for t in config.tools]
    result.wordlists = [_entry("wordlist", w) for w in config.wordlists]
    logger.debug(
        "inventory: %d available, %d unavailable, %d unspecified",
        result.available,
        result.unavailable,
        result.unspecified,
    )
    return result


def check_inventory(config_path: Path) -> InventoryResult:
    """Load a configuration and probe everything it declares.

    Backs both the ``--list`` and ``--bc`` modes; they differ only in
    how the CLI renders the result.
    """
    try:
        config = load_config(config_path)
    except ConfigLoadError as e:
        return InventoryResult(error=str(e))
    return build_inventory(config)
