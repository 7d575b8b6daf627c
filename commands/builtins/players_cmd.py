from __future__ import annotations

from commands.schemas import BuiltinCommandInfo
from commands.sources import BuiltinCommandTable
from protocol.command_ids import CMD_PLAYERS

SPEC = BuiltinCommandInfo(
    name=CMD_PLAYERS,
    required_rights=None,
    description="List all connected players",
    help_text="List all connected players. Use: /players",
)


def register(table: BuiltinCommandTable) -> None:
    table.register(SPEC)
