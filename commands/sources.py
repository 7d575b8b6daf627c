"""Command sources feeding the help registry.

The host exposes its builtin commands through ``BuiltinCommandSource``;
server add-ons register theirs in an ``ExtensionCommandSource`` at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Protocol

from access.levels import NONE, AccessLevel
from commands.schemas import BuiltinCommandInfo, ExtensionCommandInfo, TextProvider


class SourceUnavailableError(RuntimeError):
    """Raised when a command source cannot enumerate its commands."""


class BuiltinCommandSource(Protocol):
    def enumerate_builtin_commands(self) -> Iterable[BuiltinCommandInfo]: ...


class ExtensionCommandSource(Protocol):
    def enumerate_extension_commands(self) -> Mapping[str, ExtensionCommandInfo]: ...


class BuiltinCommandTable:
    """Host builtin commands, filled by ``commands.loader``."""

    def __init__(self) -> None:
        self._commands: dict[str, BuiltinCommandInfo] = {}

    def register(self, info: BuiltinCommandInfo) -> None:
        key = info.name.lower()
        if key in self._commands:
            raise ValueError(f"duplicate builtin command: {key}")
        self._commands[key] = info

    def enumerate_builtin_commands(self) -> Iterable[BuiltinCommandInfo]:
        return list(self._commands.values())


class ExtensionCommandRegistry:
    def __init__(self) -> None:
        self._commands: dict[str, ExtensionCommandInfo] = {}

    def register(
        self,
        name: str,
        description: str | TextProvider = "",
        access_level: AccessLevel = NONE,
    ) -> None:
        key = name.strip().lower()
        if key == "":
            raise ValueError("extension command name must be non-empty")
        if key in self._commands:
            raise ValueError(f"duplicate extension command: {key}")
        self._commands[key] = ExtensionCommandInfo(description=description, access_level=access_level)

    def unregister(self, name: str) -> None:
        self._commands.pop(name.strip().lower(), None)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def enumerate_extension_commands(self) -> Mapping[str, ExtensionCommandInfo]:
        return MappingProxyType(dict(self._commands))
