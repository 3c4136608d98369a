"""
Resolver — package manager selection.

Decides which package manager's command list an install runs.
Managers are tried in the order the configuration declares them;
the first one whose binary is on PATH wins.
"""

from __future__ import annotations

import logging

from shotit.core.detection.environment import binary_exists
from shotit.core.models.config import ManagerCommands

logger = logging.getLogger(__name__)


def select_manager(candidates: list[ManagerCommands]) -> ManagerCommands | None:
    """Pick the first candidate whose package manager is installed.

    Args:
        candidates: Ordered (manager, commands) pairs.

    Returns:
        The winning pair, or ``None`` if no manager is present.
    """
    for candidate in candidates:
        if binary_exists(candidate.name):
            logger.debug("package manager %s found", candidate.name)
            return candidate
        logger.debug("package manager %s not found", candidate.name)
    return None
