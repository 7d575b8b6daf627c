"""Merged, cached catalog of builtin and extension commands."""

from __future__ import annotations

import logging
import threading
from typing import Iterator, Mapping

from commands.schemas import BuiltinCommandInfo, CommandDescriptor
from commands.sources import BuiltinCommandSource, ExtensionCommandSource


class Catalog(Mapping[str, CommandDescriptor]):
    """Read-only view of the merged commands, iterated in name order."""

    def __init__(self, descriptors: Mapping[str, CommandDescriptor]) -> None:
        self._entries = {name: descriptors[name] for name in sorted(descriptors)}

    def __getitem__(self, name: str) -> CommandDescriptor:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> list[str]:
        return list(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({self.names()!r})"


class CommandRegistry:
    def __init__(
        self,
        builtin_source: BuiltinCommandSource,
        extension_source: ExtensionCommandSource,
        logger: logging.Logger | None = None,
    ) -> None:
        self._builtin_source = builtin_source
        self._extension_source = extension_source
        self.logger = logger or logging.getLogger("help.registry")
        self._lock = threading.Lock()
        self._catalog: Catalog | None = None

    def get_catalog(self) -> Catalog:
        catalog = self._catalog
        if catalog is not None:
            return catalog
        with self._lock:
            if self._catalog is None:
                self._catalog = self._build()
            return self._catalog

    def invalidate(self) -> None:
        with self._lock:
            self._catalog = None
        self.logger.info("Command catalog invalidated")

    def lookup(self, name: str) -> CommandDescriptor | None:
        key = name.strip().lower()
        if key.startswith("/"):
            key = key[1:]
        return self.get_catalog().get(key)

    def _build(self) -> Catalog:
        extension_commands = dict(self._extension_source.enumerate_extension_commands())
        extension_names = {name.lower() for name in extension_commands}

        merged: dict[str, CommandDescriptor] = {}
        for info in self._enumerate_builtins():
            name = info.name.lower()
            if name in extension_names:
                continue
            merged[name] = CommandDescriptor.from_builtin(info)

        for name, info in extension_commands.items():
            merged[name.lower()] = CommandDescriptor.from_extension(name, info)

        catalog = Catalog(merged)
        self.logger.info(
            "Command catalog built: %d commands (%d extension)", len(catalog), len(extension_commands)
        )
        return catalog

    def _enumerate_builtins(self) -> list[BuiltinCommandInfo]:
        # Materialize inside the guard so a source failing mid-iteration yields nothing.
        try:
            return list(self._builtin_source.enumerate_builtin_commands())
        except Exception as exc:  # noqa: BLE001
            self.logger.warning("Builtin command enumeration unavailable: %s: %s", type(exc).__name__, exc)
            return []
