"""Console output of chat lines, with rich colour rendering."""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.text import Text

from protocol.markup import RGB_TAG_RE, SPACE_SYMBOL, strip_markup

Reporter = Callable[[str], None]


def _rgb_style(red: str, green: str, blue: str) -> str:
    channels = []
    for value in (red, green, blue):
        try:
            channel = float(value)
        except ValueError:
            channel = 1.0
        channels.append(max(0, min(255, round(channel * 255))))
    return "rgb({},{},{})".format(*channels)


def render_chat_markup(message: str) -> Text:
    """Turn ``<RGB:r,g,b>`` tags into styled spans; untagged text keeps the default style."""
    text = Text()
    style = ""
    position = 0
    for match in RGB_TAG_RE.finditer(message):
        if match.start() > position:
            text.append(message[position:match.start()].replace(SPACE_SYMBOL, " "), style=style)
        style = _rgb_style(*match.groups())
        position = match.end()
    if position < len(message):
        text.append(message[position:].replace(SPACE_SYMBOL, " "), style=style)
    return text


def _plain_reporter(message: str) -> None:
    print(strip_markup(message))


def make_reporter(use_rich: bool = True, console: Console | None = None) -> Reporter:
    if not use_rich:
        return _plain_reporter

    target = console or Console(highlight=False)

    def reporter(message: str) -> None:
        target.print(render_chat_markup(message), soft_wrap=True)

    return reporter
