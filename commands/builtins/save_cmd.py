from __future__ import annotations

from access.levels import RIGHTS_ADMIN
from commands.schemas import BuiltinCommandInfo
from commands.sources import BuiltinCommandTable
from protocol.command_ids import CMD_SAVE

SPEC = BuiltinCommandInfo(
    name=CMD_SAVE,
    required_rights=RIGHTS_ADMIN,
    description="Save the current world",
    help_text="Save the current world. Use: /save",
)


def register(table: BuiltinCommandTable) -> None:
    table.register(SPEC)
