"""Chat caller model and chat-line parsing."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Any, Callable

from access.levels import AccessLevel

COMMAND_PREFIX = "/"


@dataclass(frozen=True)
class Caller:
    username: str
    access_level: AccessLevel
    channel: Any = None


SendLine = Callable[[Caller, str], None]
AccessResolver = Callable[[Caller], AccessLevel]


class ChatParseError(ValueError):
    def __init__(self, line: str, message: str) -> None:
        super().__init__(message)
        self.line = line
        self.message = message


def caller_access_level(caller: Caller) -> AccessLevel:
    return caller.access_level


def is_chat_command(line: str) -> bool:
    return line.strip().startswith(COMMAND_PREFIX)


def parse_chat_command(line: str) -> tuple[str, list[str]]:
    """Split ``/name arg ...`` into a lowercase command name and its raw args."""
    text = line.strip()
    if not text.startswith(COMMAND_PREFIX):
        raise ChatParseError(line, "chat command must start with '/'")
    try:
        tokens = shlex.split(text[len(COMMAND_PREFIX):])
    except ValueError as exc:
        raise ChatParseError(line, f"invalid chat command: {exc}") from exc
    if not tokens:
        raise ChatParseError(line, "chat command name is empty")
    return tokens[0].lower(), tokens[1:]
