"""
Configuration loader — reads a tools YAML file into domain models.

This is the only place configuration text is turned into a
:class:`~shotit.core.models.config.Config`. It reads YAML, validates
against the Pydantic schema, and returns a typed, frozen object.
Any failure surfaces as :class:`ConfigLoadError` before anything runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from shotit.core.models.config import Config

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Raised when the configuration file is missing, unreadable or invalid."""


def load_config(path: Path | str) -> Config:
    """Load and validate a tools configuration file.

    Args:
        path: Path to the YAML file (relative paths resolve against cwd).

    Returns:
        Validated, immutable Config.

    Raises:
        ConfigLoadError: If the file is missing, unreadable or invalid.
    """
    try:
        abs_path = Path(path).expanduser().resolve()
    except (OSError, RuntimeError) as e:
        raise ConfigLoadError(f"invalid file path: {e}") from e

    if not abs_path.is_file():
        raise ConfigLoadError(f"config file not found: {abs_path}")

    logger.debug("Loading config from %s", abs_path)

    try:
        raw = abs_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"failed to read file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"failed to parse YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"expected a YAML mapping in {abs_path}, got {type(data).__name__}"
        )

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"invalid configuration: {e}") from e

    logger.info(
        "Loaded config '%s': %d installs, %d tools, %d wordlists",
        config.name,
        len(config.installs),
        len(config.tools),
        len(config.wordlists),
    )
    return config
