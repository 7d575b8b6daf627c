"""Load builtin command declarations into the host command table."""

from commands.builtins import BUILTIN_MODULES
from commands.sources import BuiltinCommandTable


def load_builtin_commands(table: BuiltinCommandTable) -> BuiltinCommandTable:
    for module in BUILTIN_MODULES:
        module.register(table)
    return table
