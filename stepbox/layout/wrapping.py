"""Greedy word wrapping into bordered rows."""

import logging
from collections.abc import Callable, Iterator
from typing import TypeAlias

from stepbox.layout.rows import build_row
from stepbox.layout.width import BORDER_WIDTH

log = logging.getLogger(__name__)

Highlight: TypeAlias = tuple[str, Callable[[str], str]]


def wrap_lines(text: str, width: int) -> Iterator[str]:
    """Yield lines of at most ``width`` characters, breaking between words.

    Any whitespace (newlines, carriage returns, tabs) separates words and
    runs of it collapse. The last line is always yielded, so empty text
    gives one empty line. A single word longer than ``width`` is split
    into ``width`` sized pieces; joining the lines then no longer gives
    back the original words.
    """
    words = text.split()

    line = ""
    for word in words:
        candidate = f"{line} {word}" if line else word
        if len(candidate) <= width:
            line = candidate
            continue

        if line:
            yield line
        line = word

        if len(word) > width:
            log.warning("Word longer than %d chars, breaking it: %s", width, word)
            while len(line) > width:
                yield line[:width]
                line = line[width:]

    yield line


def wrap_rows(
    text: str, width: int, *, highlight: Highlight | None = None
) -> Iterator[str]:
    """Yield ``| line |`` rows of interior ``width`` for wrapped ``text``.

    With ``highlight=(prefix, paint)`` the prefix is painted when the first
    line starts with it. Painting happens after the line is cut, so it
    never counts against the width.
    """
    for number, line in enumerate(wrap_lines(text, width)):
        if number == 0 and highlight is not None:
            prefix, paint = highlight
            if line.startswith(prefix):
                line = paint(prefix) + line[len(prefix) :]
        yield build_row(line, width + BORDER_WIDTH)
