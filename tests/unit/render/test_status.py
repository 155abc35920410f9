"""Tests for status styles."""

import logging

import pytest

from stepbox.colors import Color
from stepbox.models.result import StepStatus
from stepbox.render.status import style_for


@pytest.mark.parametrize(
    ("status", "icon", "color", "shows_exit_code"),
    [
        (StepStatus.SUCCESS, "✅", Color.GREEN, False),
        (StepStatus.FAILED, "🚫", Color.RED, True),
        (StepStatus.FAILED_SKIPPABLE, "⚠️", Color.YELLOW, True),
        (StepStatus.SKIPPED, "➡", Color.BLUE, False),
        (StepStatus.SKIPPED_WITH_CONDITION, "↪", Color.BLUE, False),
    ],
)
def test_style_for_known_status(
    status: StepStatus, icon: str, color: Color, shows_exit_code: bool
) -> None:
    """Maps each status to its icon and color."""
    style = style_for(status)

    assert style is not None
    assert style.icon == icon
    assert style.color == color
    assert style.shows_exit_code is shows_exit_code


def test_mapping_is_total_and_stable() -> None:
    """Every status has one style and asking again gives the same one."""
    styles = {status: style_for(status) for status in StepStatus}

    assert None not in styles.values()
    assert len({style.icon for style in styles.values() if style}) == len(StepStatus)
    assert all(style_for(status) == style for status, style in styles.items())


def test_unknown_status_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Returns None and logs for a value outside the enumeration."""
    with caplog.at_level(logging.ERROR):
        style = style_for("exploded")  # type: ignore[arg-type]

    assert style is None
    assert "Unknown step status: exploded" in caplog.text
