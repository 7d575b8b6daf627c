"""Minimal chat command host used by the development console."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from commands.help_cmd import ChatHandler
from protocol.chat import Caller, ChatParseError, SendLine, parse_chat_command


@dataclass(frozen=True)
class HostedCommand:
    name: str
    handler: ChatHandler
    description: str = ""


class ChatCommandHost:
    def __init__(self, send_line: SendLine, logger: logging.Logger | None = None) -> None:
        self._send_line = send_line
        self.logger = logger or logging.getLogger("help.host")
        self._commands: dict[str, HostedCommand] = {}

    def register(self, name: str, handler: ChatHandler, description: str = "") -> None:
        key = name.lower()
        if key in self._commands:
            raise ValueError(f"duplicate command: {key}")
        self._commands[key] = HostedCommand(name=key, handler=handler, description=description)

    def dispatch(self, caller: Caller | None, name: str, args: Sequence[str]) -> bool:
        hosted = self._commands.get(name.lower())
        if hosted is None:
            if caller is not None:
                self._send_line(caller, f"Unknown command: {name}")
            return False
        self.logger.debug("dispatch /%s args=%s", hosted.name, list(args))
        hosted.handler(caller, list(args))
        return True

    def handle_line(self, caller: Caller | None, line: str) -> bool:
        try:
            name, args = parse_chat_command(line)
        except ChatParseError as exc:
            if caller is not None:
                self._send_line(caller, exc.message)
            return False
        return self.dispatch(caller, name, args)

    def command_names(self) -> list[str]:
        return sorted(self._commands)
