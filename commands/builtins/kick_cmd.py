from __future__ import annotations

from access.levels import RIGHTS_STAFF
from commands.schemas import BuiltinCommandInfo
from commands.sources import BuiltinCommandTable
from protocol.command_ids import CMD_KICK

SPEC = BuiltinCommandInfo(
    name=CMD_KICK,
    required_rights=RIGHTS_STAFF,
    description="Kick a user",
    help_text='Kick a user. Add a reason by using -r "reason". Use: /kickuser "username" -r "reason"',
)


def register(table: BuiltinCommandTable) -> None:
    table.register(SPEC)
