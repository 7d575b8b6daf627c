"""Development console: chat with the help command as a simulated player."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from access.evaluator import AccessEvaluator  # noqa: E402
from access.levels import MODERATOR, NONE, STANDARD_LEVELS, UnknownAccessLevelError, level_by_name  # noqa: E402
from app.console_host import ChatCommandHost  # noqa: E402
from commands import help_cmd  # noqa: E402
from commands.help_cmd import HelpCommandHandler  # noqa: E402
from commands.loader import load_builtin_commands  # noqa: E402
from commands.registry import CommandRegistry  # noqa: E402
from commands.sources import BuiltinCommandTable, ExtensionCommandRegistry  # noqa: E402
from common.reporting import make_reporter  # noqa: E402
from config.defaults import DEFAULT_ACCESS_LEVEL, DEFAULT_USERNAME  # noqa: E402
from config.settings import SettingsError, load_settings  # noqa: E402
from protocol.chat import Caller, is_chat_command  # noqa: E402
from protocol.command_ids import CMD_LEVEL, CMD_RELOAD, CMD_TELEPORT  # noqa: E402


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Chat console for the server help command")
    parser.add_argument("--username", default=DEFAULT_USERNAME, help="simulated player name")
    parser.add_argument(
        "--access-level",
        default=DEFAULT_ACCESS_LEVEL,
        choices=[level.name for level in STANDARD_LEVELS],
        help="simulated player access level",
    )
    parser.add_argument("--settings", default=None, help="JSON file with help texts")
    parser.add_argument("--plain", action="store_true", help="print chat lines without colours")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


class ConsoleSession:
    def __init__(self, caller: Caller, use_rich: bool) -> None:
        self.caller = caller
        self._report = make_reporter(use_rich)

    def send_line(self, caller: Caller, text: str) -> None:
        self._report(text)


def build_host(session: ConsoleSession, settings_path: str | None) -> tuple[ChatCommandHost, CommandRegistry]:
    settings = load_settings(settings_path)
    builtins = load_builtin_commands(BuiltinCommandTable())
    extensions = ExtensionCommandRegistry()
    registry = CommandRegistry(builtins, extensions)

    handler = HelpCommandHandler(registry, AccessEvaluator(), settings, session.send_line)
    extensions.register(handler.name, lambda: handler.description, NONE)
    extensions.register(CMD_TELEPORT, "", MODERATOR)

    host = ChatCommandHost(session.send_line)
    help_cmd.register(host, handler)

    def _switch_level(caller: Caller | None, args: Sequence[str]) -> None:
        if caller is None or not args:
            return
        try:
            level = level_by_name(args[0])
        except UnknownAccessLevelError as exc:
            session.send_line(caller, str(exc))
            return
        session.caller = Caller(caller.username, level, caller.channel)
        session.send_line(caller, f"Access level is now {level.name}")

    def _reload(caller: Caller | None, _args: Sequence[str]) -> None:
        registry.invalidate()
        if caller is not None:
            session.send_line(caller, "Command catalog will be rebuilt")

    host.register(CMD_LEVEL, _switch_level, "Switch the simulated access level")
    host.register(CMD_RELOAD, _reload, "Rebuild the command catalog")
    return host, registry


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    caller = Caller(args.username, level_by_name(args.access_level))
    session = ConsoleSession(caller, use_rich=not args.plain)
    try:
        host, _registry = build_host(session, args.settings)
    except SettingsError as exc:
        raise SystemExit(f"Invalid settings: {exc}")

    print("Type chat commands such as /help or /help kickuser. Ctrl-D to quit.")
    for raw in sys.stdin:
        line = raw.strip()
        if line == "":
            continue
        if not is_chat_command(line):
            session.send_line(session.caller, f"{session.caller.username}: {line}")
            continue
        host.handle_line(session.caller, line)
    return 0


def run() -> int:
    try:
        return main()
    except KeyboardInterrupt:
        print("\n[console] interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
