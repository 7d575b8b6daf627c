"""Default help texts and settings keys."""

COMMAND_DESCRIPTION_KEY = "commandDescription"
HELP_TEXT_KEY = "helpText"
COMMANDS_LIST_TEXT_KEY = "commandsListText"
NO_RIGHTS_KEY = "noRights"
NO_COMMANDS_KEY = "noCommands"

DEFAULT_HELP_DESCRIPTION = "Additional information about the server and commands"

# Empty means "use DEFAULT_HELP_DESCRIPTION".
DEFAULT_COMMAND_DESCRIPTION = ""

DEFAULT_HELP_TEXT = (
    "<RGB:0.9,0.7,0.2> Welcome to the server, <PLAYER>!",
    "<RGB:1,1,1> Type <RGB:0.4,0.5,0.8> /help <SPACE> command <RGB:1,1,1> for details on a command.",
)
DEFAULT_COMMANDS_LIST_TEXT = "<RGB:1,1,1> Commands available to <PLAYER>:"
DEFAULT_NO_RIGHTS = "<RGB:1,0.3,0.3> You do not have the rights to use this command."
DEFAULT_NO_COMMANDS = "<RGB:1,0.3,0.3> No such command."

DEFAULT_USERNAME = "player"
DEFAULT_ACCESS_LEVEL = "none"
