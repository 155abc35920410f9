"""Tests for ANSI color helpers."""

from stepbox.colors import RESET, Color, colorize, strip_ansi, visible_len


def test_colorize() -> None:
    """Wraps text in the color code and a reset."""
    assert colorize("failed", Color.RED) == f"\033[31;1mfailed{RESET}"


def test_colorize_empty_text() -> None:
    """Leaves empty text alone."""
    assert colorize("", Color.GREEN) == ""


def test_markup_has_no_visible_length() -> None:
    """Measures colored text by its plain characters."""
    text = colorize("[Deprecated]", Color.RED) + colorize(" Build", Color.BLUE)

    assert strip_ansi(text) == "[Deprecated] Build"
    assert visible_len(text) == 18
