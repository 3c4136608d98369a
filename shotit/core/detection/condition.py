"""
Detection — condition evaluation.

A tool or wordlist may declare ``condition: <text>``. The text is
either an OS name (``linux``, ``macos``, ``windows``) or, failing
that, the name of a binary that must be on PATH.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from shotit.core.detection.environment import binary_exists, os_matches

logger = logging.getLogger(__name__)


class ConditionKind(StrEnum):
    """Closed set of condition kinds."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    BINARY = "binary"


@dataclass(frozen=True)
class Condition:
    """A parsed condition: its kind and the original text."""

    kind: ConditionKind
    value: str


_OS_NAMES = {
    "linux": ConditionKind.LINUX,
    "macos": ConditionKind.MACOS,
    "windows": ConditionKind.WINDOWS,
}

_EVALUATORS: dict[ConditionKind, Callable[[Condition], bool]] = {
    ConditionKind.LINUX: lambda c: os_matches("linux"),
    ConditionKind.MACOS: lambda c: os_matches("macos"),
    ConditionKind.WINDOWS: lambda c: os_matches("windows"),
    ConditionKind.BINARY: lambda c: binary_exists(c.value),
}


def parse_condition(text: str) -> Condition:
    """Classify condition text. OS names match exactly; anything else is a binary."""
    return Condition(kind=_OS_NAMES.get(text, ConditionKind.BINARY), value=text)


def evaluate_condition(text: str) -> bool:
    """Whether the condition holds on this system.

    The empty string is a binary probe for "" and so never holds.
    """
    condition = parse_condition(text)
    met = _EVALUATORS[condition.kind](condition)
    logger.debug("condition %r (%s) → %s", text, condition.kind, met)
    return met
