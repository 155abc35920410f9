"""Bordered rows and fixed-width cells."""

import logging

from stepbox.colors import visible_len
from stepbox.layout.width import BORDER_WIDTH

log = logging.getLogger(__name__)


def build_row(content: str, width: int) -> str:
    """Wrap ``content`` as ``| content |`` padded to ``width``.

    Padding is computed from the visible length, so colored content is
    accepted. Content is never truncated here: anything longer than
    ``width - 4`` yields a row wider than ``width``.
    """
    padding = width - BORDER_WIDTH - visible_len(content)
    return f"| {content}{' ' * max(padding, 0)} |"


def clip_row(content: str, width: int) -> str:
    """Build a row from plain ``content``, cutting it if it doesn't fit."""
    interior = width - BORDER_WIDTH
    if len(content) > interior:
        log.error("Row content longer than %d chars, clipping: %s", interior, content)
        content = content[:interior]
    return build_row(content, width)


def build_cell(content: str, width: int) -> str:
    """Render ``" " + content`` padded to a ``width`` wide table cell.

    Plain content that doesn't fit is clipped and logged.
    """
    room = width - 1
    if len(content) > room:
        log.error("Cell content longer than %d chars, clipping: %s", room, content)
        content = content[:room]
    return f" {content}{' ' * (room - len(content))}"
