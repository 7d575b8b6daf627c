"""Chat rendering for the help command."""

from __future__ import annotations

from typing import Iterable

from commands.schemas import CommandDescriptor
from protocol.markup import COLOR_COMMAND, COLOR_TEXT, PLAYER_PLACEHOLDER, SPACE_PLACEHOLDER, SPACE_SYMBOL

NO_DESCRIPTION = "No description"

ENTRY_PREFIX = f"{COLOR_COMMAND} /"
LISTING_SEPARATOR = f" {COLOR_TEXT} , {SPACE_PLACEHOLDER} {SPACE_PLACEHOLDER}"
DETAIL_SEPARATOR = f" {COLOR_TEXT} {SPACE_PLACEHOLDER} - "

# Joined listings at or below this length carry no separator to trim.
_MIN_TRIM_LENGTH = 2


def format_line(template: str, caller_name: str) -> str:
    return template.replace(PLAYER_PLACEHOLDER, caller_name).replace(SPACE_PLACEHOLDER, SPACE_SYMBOL)


def format_listing(descriptors: Iterable[CommandDescriptor | str]) -> str:
    separator = format_line(LISTING_SEPARATOR, "")
    text = "".join(format_line(ENTRY_PREFIX + _name_of(item), "") + separator for item in descriptors)
    if len(text) > _MIN_TRIM_LENGTH:
        text = text[: len(text) - len(separator)]
    return text


def format_detail(descriptor: CommandDescriptor | str, help_text: str | None = None) -> str:
    """Render ``/name - text`` for one command.

    ``help_text`` defaults to the descriptor's help body; empty text renders
    as ``No description``.
    """
    if help_text is None and isinstance(descriptor, CommandDescriptor):
        help_text = descriptor.help_text
    head = format_line(ENTRY_PREFIX + _name_of(descriptor) + DETAIL_SEPARATOR, "")
    return head + (help_text if help_text else NO_DESCRIPTION)


def _name_of(item: CommandDescriptor | str) -> str:
    return item.name if isinstance(item, CommandDescriptor) else item
