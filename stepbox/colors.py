"""ANSI color wrappers.

Wrapped text keeps its visible length; ``visible_len`` and ``strip_ansi``
measure and undo the markup.
"""

import re
from enum import StrEnum

RESET = "\033[0m"

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class Color(StrEnum):
    """Bold foreground colors used by the report."""

    RED = "\033[31;1m"
    GREEN = "\033[32;1m"
    YELLOW = "\033[33;1m"
    BLUE = "\033[34;1m"


def colorize(text: str, color: Color) -> str:
    """Wrap ``text`` in ``color``; empty text stays empty."""
    if not text:
        return text
    return f"{color}{text}{RESET}"


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    """Length in code points, ignoring color markup."""
    return len(strip_ansi(text))
