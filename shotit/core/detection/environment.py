"""
Detection — environment probes.

Read-only checks the planner consults before running anything:
is a binary on PATH, does a (possibly ``$VAR``-laden) path exist,
and a coarse guess at which OS we are on.
"""

from __future__ import annotations

import logging
import os
import shutil

logger = logging.getLogger(__name__)

# Diagnostic override: a platform name such as "linux", "darwin" or "windows".
OS_OVERRIDE_ENV = "SHOTIT_OS"

LINUX_MARKER = "/etc/os-release"
MACOS_MARKER = "/System/Library/CoreServices/SystemVersion.plist"

# kind → substrings that identify it in the override variable
_OS_SIGNALS: dict[str, tuple[str, ...]] = {
    "linux": ("linux",),
    "macos": ("darwin", "macos"),
    "windows": ("windows",),
}


def binary_exists(name: str) -> bool:
    """Whether ``name`` resolves to an executable on PATH."""
    if not name:
        return False
    return shutil.which(name) is not None


def expand_path(path: str) -> str:
    """Expand ``$VAR`` / ``${VAR}`` references and a leading ``~``."""
    return os.path.expanduser(os.path.expandvars(path))


def path_exists(path: str) -> bool:
    """Whether ``path`` exists after environment-variable expansion.

    Any kind of entry counts: file, directory, device, socket.
    """
    if not path:
        return False
    expanded = expand_path(path)
    exists = os.path.exists(expanded)
    logger.debug("path %s → %s (%s)", path, expanded, "present" if exists else "absent")
    return exists


def os_matches(kind: str) -> bool:
    """Best-effort check that we are running on ``kind``.

    ``kind`` is one of ``linux``, ``macos``, ``windows``. True if the
    ``SHOTIT_OS`` override names that platform, or an OS marker is
    present (``/etc/os-release``, the macOS SystemVersion.plist, or
    ``OS=Windows_NT``). Unknown kinds never match.
    """
    signals = _OS_SIGNALS.get(kind)
    if signals is None:
        return False

    override = os.environ.get(OS_OVERRIDE_ENV, "").lower()
    if override and any(s in override for s in signals):
        return True

    if kind == "linux":
        return os.path.exists(LINUX_MARKER)
    if kind == "macos":
        return os.path.exists(MACOS_MARKER)
    return os.environ.get("OS", "") == "Windows_NT"
