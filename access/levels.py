"""Ordered caller access tiers used by the game server."""

from __future__ import annotations

from dataclasses import dataclass, field


class UnknownAccessLevelError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown access level: {name}")
        self.name = name


@dataclass(frozen=True, order=True)
class AccessLevel:
    """A privilege tier; ordering and equality use ``priority`` only.

    ``rights_bit`` is the single flag this tier contributes when checked
    against a builtin command's rights bitmask.
    """

    priority: int
    name: str = field(compare=False)
    rights_bit: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return self.name


NONE = AccessLevel(0, "none", 1)
OBSERVER = AccessLevel(1, "observer", 2)
GM = AccessLevel(2, "gm", 4)
OVERSEER = AccessLevel(3, "overseer", 8)
MODERATOR = AccessLevel(4, "moderator", 16)
ADMIN = AccessLevel(5, "admin", 32)

STANDARD_LEVELS = (NONE, OBSERVER, GM, OVERSEER, MODERATOR, ADMIN)

# Bitmask helpers for builtin command declarations.
RIGHTS_ADMIN = ADMIN.rights_bit
RIGHTS_STAFF = ADMIN.rights_bit | MODERATOR.rights_bit | OVERSEER.rights_bit
RIGHTS_ALL_STAFF = RIGHTS_STAFF | GM.rights_bit | OBSERVER.rights_bit

_ALIASES = {
    "player": NONE,
    "": NONE,
}


def level_by_name(name: str) -> AccessLevel:
    key = name.strip().lower()
    for level in STANDARD_LEVELS:
        if level.name == key:
            return level
    if key in _ALIASES:
        return _ALIASES[key]
    raise UnknownAccessLevelError(name)
