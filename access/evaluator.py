"""Per-caller visibility decision for catalog commands."""

from __future__ import annotations

import logging

from commands.schemas import BuiltinRights, CommandDescriptor, ExtensionRights
from protocol.chat import AccessResolver, Caller, caller_access_level


class AccessEvaluator:
    """Decide whether a caller may see (and run) a command.

    Builtin commands carry a rights bitmask and fail open when it cannot be
    evaluated. Extension commands carry a minimum tier compared by priority.
    """

    def __init__(self, resolve_access_level: AccessResolver | None = None, logger: logging.Logger | None = None) -> None:
        self._resolve = resolve_access_level or caller_access_level
        self.logger = logger or logging.getLogger("help.access")

    def can_see(self, descriptor: CommandDescriptor, caller: Caller) -> bool:
        rights = descriptor.rights
        if isinstance(rights, ExtensionRights):
            return self._resolve(caller).priority >= rights.level.priority
        if isinstance(rights, BuiltinRights):
            return self._builtin_permits(descriptor.name, rights, caller)
        return True

    def _builtin_permits(self, name: str, rights: BuiltinRights, caller: Caller) -> bool:
        if rights.mask is None:
            return True
        try:
            level = self._resolve(caller)
            return (level.rights_bit & int(rights.mask)) != 0
        except Exception as exc:  # noqa: BLE001
            self.logger.debug("rights check failed for /%s, permitting: %s: %s", name, type(exc).__name__, exc)
            return True
