"""Command descriptors shared by the registry, access checks and help output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from access.levels import AccessLevel

TextProvider = Callable[[], str]


class CommandSource(str, Enum):
    BUILTIN = "builtin"
    EXTENSION = "extension"


@dataclass(frozen=True)
class BuiltinRights:
    """Host rights flags; ``mask is None`` means the command is open to all."""

    mask: Any = None


@dataclass(frozen=True)
class ExtensionRights:
    level: AccessLevel


CommandRights = Union[BuiltinRights, ExtensionRights]


@dataclass(frozen=True)
class BuiltinCommandInfo:
    name: str
    required_rights: int | None
    description: str
    help_text: str


@dataclass(frozen=True)
class ExtensionCommandInfo:
    description: str | TextProvider
    access_level: AccessLevel


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    source: CommandSource
    rights: CommandRights
    description_provider: TextProvider
    help_text_provider: TextProvider

    @property
    def required_access(self) -> Any:
        if isinstance(self.rights, ExtensionRights):
            return self.rights.level
        return self.rights.mask

    @property
    def description(self) -> str:
        return self.description_provider() or ""

    @property
    def help_text(self) -> str:
        return self.help_text_provider() or ""

    @classmethod
    def from_builtin(cls, info: BuiltinCommandInfo) -> "CommandDescriptor":
        description = info.description
        help_text = info.help_text
        return cls(
            name=info.name.lower(),
            source=CommandSource.BUILTIN,
            rights=BuiltinRights(info.required_rights),
            description_provider=lambda: description,
            help_text_provider=lambda: help_text,
        )

    @classmethod
    def from_extension(cls, name: str, info: ExtensionCommandInfo) -> "CommandDescriptor":
        provider = _as_provider(info.description)
        return cls(
            name=name.lower(),
            source=CommandSource.EXTENSION,
            rights=ExtensionRights(info.access_level),
            description_provider=provider,
            help_text_provider=provider,
        )


def _as_provider(description: str | TextProvider | None) -> TextProvider:
    if callable(description):
        return description
    text = description or ""
    return lambda: text
