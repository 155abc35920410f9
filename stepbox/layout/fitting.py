"""Truncation of text to an exact character budget."""

import logging

log = logging.getLogger(__name__)

ELLIPSIS = "..."
MIN_FIELD_WIDTH = 4


def fit_first_chars(
    text: str, max_chars: int, *, min_width: int = MIN_FIELD_WIDTH
) -> str:
    """Keep the beginning of ``text`` and mark the cut with an ellipsis.

    Returns ``text`` unchanged when it already fits. When ``max_chars`` is
    below ``min_width`` nothing readable would remain, so the text is
    returned as is and the failure is logged; the caller decides how to
    present it.
    """
    if len(text) <= max_chars:
        return text
    if max_chars < min_width:
        log.error(
            "Text too long, can't present it in %d chars at all: %s", max_chars, text
        )
        return text
    keep = max(max_chars - len(ELLIPSIS), 0)
    return text[:keep] + ELLIPSIS


def fit_last_chars(
    text: str, max_chars: int, *, min_width: int = MIN_FIELD_WIDTH
) -> str:
    """Keep the end of ``text``; used where the suffix tells values apart."""
    if len(text) <= max_chars:
        return text
    if max_chars < min_width:
        log.error(
            "Text too long, can't present it in %d chars at all: %s", max_chars, text
        )
        return text
    keep = max(max_chars - len(ELLIPSIS), 0)
    return ELLIPSIS + text[len(text) - keep :]
