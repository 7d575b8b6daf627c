"""The ``help`` chat command."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from access.evaluator import AccessEvaluator
from commands.help_format import format_detail, format_line, format_listing
from commands.registry import CommandRegistry
from commands.runtime import CommandRuntime, RuntimeConfig
from commands.schemas import CommandSource
from config.defaults import DEFAULT_HELP_DESCRIPTION
from config.settings import HelpSettings
from protocol.chat import Caller, SendLine
from protocol.command_ids import CMD_HELP

ChatHandler = Callable[[Caller | None, Sequence[str]], None]


class CommandHost(Protocol):
    def register(self, name: str, handler: ChatHandler, description: str = "") -> None: ...


class HelpCommandHandler:
    """Send the command list, or details of one command, to the caller.

    Output goes line by line through ``send_line``; nothing is returned and
    no exception escapes ``invoke``.
    """

    name = CMD_HELP

    def __init__(
        self,
        registry: CommandRegistry,
        evaluator: AccessEvaluator,
        settings: HelpSettings,
        send_line: SendLine,
        logger: logging.Logger | None = None,
    ) -> None:
        self.registry = registry
        self.evaluator = evaluator
        self.settings = settings
        self._send_line = send_line
        self.logger = logger or logging.getLogger("help.command")
        self._runtime = CommandRuntime(RuntimeConfig(send_line=send_line, logger=self.logger))

    @property
    def description(self) -> str:
        return self.settings.command_description or DEFAULT_HELP_DESCRIPTION

    def invoke(self, caller: Caller | None, args: Sequence[str]) -> None:
        if caller is None:
            return
        self._runtime.run(CMD_HELP, caller, lambda: self._respond(caller, args), self.settings.no_commands)

    __call__ = invoke

    def _respond(self, caller: Caller, args: Sequence[str]) -> None:
        for line in self.settings.help_text:
            self._send_line(caller, format_line(line, caller.username))

        if len(args) == 0:
            self._send_listing(caller)
            return
        self._send_command_help(caller, args[0])

    def _send_listing(self, caller: Caller) -> None:
        catalog = self.registry.get_catalog()
        visible = [descriptor for descriptor in catalog.values() if self.evaluator.can_see(descriptor, caller)]

        self._send_line(caller, format_line(self.settings.commands_list_text, caller.username))
        if not visible:
            self._send_line(caller, self.settings.no_commands)
            return
        self._send_line(caller, format_listing(visible))

    def _send_command_help(self, caller: Caller, command_name: str) -> None:
        descriptor = self.registry.lookup(command_name)
        if descriptor is None:
            self._send_line(caller, self.settings.no_commands)
            return
        if not self.evaluator.can_see(descriptor, caller):
            self.logger.debug("%s has no rights for /%s", caller.username, descriptor.name)
            self._send_line(caller, self.settings.no_rights)
            return

        if descriptor.source is CommandSource.BUILTIN:
            text = descriptor.help_text
        else:
            text = descriptor.description
        self._send_line(caller, format_detail(descriptor, text))


def register(host: CommandHost, handler: HelpCommandHandler) -> None:
    host.register(handler.name, handler.invoke, handler.description)
