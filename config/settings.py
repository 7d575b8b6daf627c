"""Help settings loaded from an optional JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from config.defaults import (
    COMMAND_DESCRIPTION_KEY,
    COMMANDS_LIST_TEXT_KEY,
    DEFAULT_COMMAND_DESCRIPTION,
    DEFAULT_COMMANDS_LIST_TEXT,
    DEFAULT_HELP_TEXT,
    DEFAULT_NO_COMMANDS,
    DEFAULT_NO_RIGHTS,
    HELP_TEXT_KEY,
    NO_COMMANDS_KEY,
    NO_RIGHTS_KEY,
)


class SettingsError(ValueError):
    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


@dataclass(frozen=True)
class HelpSettings:
    command_description: str = DEFAULT_COMMAND_DESCRIPTION
    help_text: tuple[str, ...] = DEFAULT_HELP_TEXT
    commands_list_text: str = DEFAULT_COMMANDS_LIST_TEXT
    no_rights: str = DEFAULT_NO_RIGHTS
    no_commands: str = DEFAULT_NO_COMMANDS


_STRING_FIELDS = {
    COMMAND_DESCRIPTION_KEY: "command_description",
    COMMANDS_LIST_TEXT_KEY: "commands_list_text",
    NO_RIGHTS_KEY: "no_rights",
    NO_COMMANDS_KEY: "no_commands",
}


def load_settings(path: str | Path | None) -> HelpSettings:
    if path is None:
        return HelpSettings()
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(source, f"cannot read settings: {exc.strerror or exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SettingsError(source, f"invalid JSON: {exc.msg}") from exc
    return settings_from_dict(payload, source=source)


def settings_from_dict(payload: Any, *, source: str = "<settings>") -> HelpSettings:
    if not isinstance(payload, dict):
        raise SettingsError(source, "settings must be an object")

    changes: dict[str, Any] = {}
    for key, attr in _STRING_FIELDS.items():
        if key not in payload:
            continue
        value = payload[key]
        if not isinstance(value, str):
            raise SettingsError(source, f"field `{key}` must be string")
        changes[attr] = value

    if HELP_TEXT_KEY in payload:
        changes["help_text"] = _parse_help_text(payload[HELP_TEXT_KEY], source)

    return replace(HelpSettings(), **changes)


def _parse_help_text(value: Any, source: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.splitlines())
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise SettingsError(source, f"field `{HELP_TEXT_KEY}` must be string or list of strings")
