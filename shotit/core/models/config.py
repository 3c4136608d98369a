"""
Configuration model — what the user asked to set up.

Loaded from a tools YAML file, this is the read-only description of
every install, tool and wordlist the planner walks through. Nothing
mutates it after loading.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


def _scalar_text(value: Any) -> Any:
    """Render a YAML scalar the way it was written (`cmd: true`, `name: 2024`)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, date)):
        return str(value)
    return value


# Text fields that YAML may have resolved to a number, bool or date.
ScalarText = Annotated[str, BeforeValidator(_scalar_text)]
OptionalText = Annotated[str | None, BeforeValidator(_scalar_text)]
# Same, with an empty `key:` meaning "".
Label = Annotated[str, BeforeValidator(lambda v: "" if v is None else _scalar_text(v))]


class Command(BaseModel):
    """One step of a tool or wordlist.

    Exactly one of ``cmd`` (a single required command) or ``or``
    (fallback alternatives, first success wins) is set.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cmd: OptionalText = None
    alternatives: list[ScalarText] | None = Field(default=None, alias="or")

    @model_validator(mode="after")
    def _exactly_one_variant(self) -> Command:
        if self.cmd is not None and self.alternatives is not None:
            raise ValueError("a command takes either 'cmd' or 'or', not both")
        if self.cmd is None and self.alternatives is None:
            raise ValueError("a command needs 'cmd' or 'or'")
        if self.alternatives is not None and not self.alternatives:
            raise ValueError("'or' needs at least one alternative")
        return self

    @property
    def is_fallback(self) -> bool:
        return self.alternatives is not None


class ManagerCommands(BaseModel):
    """The commands to run when a given package manager is present."""

    model_config = ConfigDict(frozen=True)

    name: ScalarText
    commands: list[ScalarText] = Field(default_factory=list)


class Install(BaseModel):
    """A system-level install, resolved through the first present package manager.

    In YAML, ``commands`` is a mapping of manager name to command list.
    It is stored as an ordered list of :class:`ManagerCommands` so the
    declared order is what decides which manager wins.
    """

    model_config = ConfigDict(frozen=True)

    name: Label = ""
    description: Label = ""
    commands: list[ManagerCommands] = Field(default_factory=list)

    @field_validator("commands", mode="before")
    @classmethod
    def _mapping_to_pairs(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, dict):
            return [
                {"name": str(name), "commands": cmds if cmds is not None else []}
                for name, cmds in value.items()
            ]
        return value

    @property
    def managers(self) -> list[str]:
        return [mc.name for mc in self.commands]


class Tool(BaseModel):
    """A tool to set up, unless its binary is already on PATH."""

    model_config = ConfigDict(frozen=True)

    name: Label = ""
    description: Label = ""
    commands: list[Command] = Field(default_factory=list)
    condition: OptionalText = None
    binary: OptionalText = None

    @field_validator("commands", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Wordlist(Tool):
    """A wordlist to fetch. ``path`` is an alternative availability check."""

    path: OptionalText = None


class Config(BaseModel):
    """Root configuration — loaded once, read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    name: Label = ""
    description: Label = ""
    installs: list[Install] = Field(default_factory=list)
    tools: list[Tool] = Field(default_factory=list)
    wordlists: list[Wordlist] = Field(default_factory=list)

    @field_validator("installs", "tools", "wordlists", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value
