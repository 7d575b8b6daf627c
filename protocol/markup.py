"""Chat markup tokens understood by the game client chat window."""

from __future__ import annotations

import re

PLAYER_PLACEHOLDER = "<PLAYER>"
SPACE_PLACEHOLDER = "<SPACE>"

# The chat window collapses plain spaces around tags; this one survives.
SPACE_SYMBOL = "\u00a0"

COLOR_COMMAND = "<RGB:0.4,0.5,0.8>"
COLOR_TEXT = "<RGB:1,1,1>"

RGB_TAG_RE = re.compile(r"<RGB:\s*([0-9.]+)\s*,\s*([0-9.]+)\s*,\s*([0-9.]+)\s*>")


def strip_markup(text: str) -> str:
    return RGB_TAG_RE.sub("", text).replace(SPACE_SYMBOL, " ")
