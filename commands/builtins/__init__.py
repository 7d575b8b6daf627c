"""Host builtin command declarations."""

from commands.builtins import (
    ban_cmd,
    kick_cmd,
    players_cmd,
    save_cmd,
    servermsg_cmd,
)

BUILTIN_MODULES = (
    players_cmd,
    kick_cmd,
    ban_cmd,
    servermsg_cmd,
    save_cmd,
)
