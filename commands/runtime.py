"""Guarded execution for chat command handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from protocol.chat import Caller, SendLine

CommandCall = Callable[[], None]


@dataclass(frozen=True)
class RuntimeConfig:
    send_line: SendLine
    logger: logging.Logger


class CommandRuntime:
    """Run a handler body so that no failure reaches the host dispatcher."""

    def __init__(self, config: RuntimeConfig) -> None:
        self._config = config

    def run(self, command_name: str, caller: Caller, call: CommandCall, fallback_text: str) -> None:
        try:
            call()
        except Exception:  # noqa: BLE001
            self._config.logger.exception("/%s failed for %s", command_name, caller.username)
            self._send_fallback(command_name, caller, fallback_text)

    def _send_fallback(self, command_name: str, caller: Caller, text: str) -> None:
        try:
            self._config.send_line(caller, text)
        except Exception as exc:  # noqa: BLE001
            self._config.logger.error("/%s fallback send failed: %s: %s", command_name, type(exc).__name__, exc)
