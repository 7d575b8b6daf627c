from __future__ import annotations

from access.levels import MODERATOR, RIGHTS_ADMIN
from commands.schemas import BuiltinCommandInfo
from commands.sources import BuiltinCommandTable
from protocol.command_ids import CMD_SERVERMSG

SPEC = BuiltinCommandInfo(
    name=CMD_SERVERMSG,
    required_rights=RIGHTS_ADMIN | MODERATOR.rights_bit,
    description="Broadcast a message to all players",
    help_text='Broadcast a message to all players. Spaces are replaced with underscores. Use: /servermsg "text"',
)


def register(table: BuiltinCommandTable) -> None:
    table.register(SPEC)
