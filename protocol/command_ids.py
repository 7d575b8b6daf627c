"""Canonical command IDs shared by the help handler, host and tests."""

CMD_HELP = "help"
CMD_PLAYERS = "players"
CMD_KICK = "kickuser"
CMD_BAN = "banuser"
CMD_SERVERMSG = "servermsg"
CMD_SAVE = "save"
CMD_TELEPORT = "teleport"

# Console-only commands understood by app/server_main.py.
CMD_LEVEL = "level"
CMD_RELOAD = "reload"
