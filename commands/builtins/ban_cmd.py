from __future__ import annotations

from access.levels import MODERATOR, RIGHTS_ADMIN
from commands.schemas import BuiltinCommandInfo
from commands.sources import BuiltinCommandTable
from protocol.command_ids import CMD_BAN

SPEC = BuiltinCommandInfo(
    name=CMD_BAN,
    required_rights=RIGHTS_ADMIN | MODERATOR.rights_bit,
    description="Ban a user",
    help_text=(
        'Ban a user. Add -ip to also ban the IP and -r "reason" to give a reason. '
        'Use: /banuser "username" -ip -r "reason"'
    ),
)


def register(table: BuiltinCommandTable) -> None:
    table.register(SPEC)
