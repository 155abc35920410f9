"""Presentation of each step status."""

import logging
from dataclasses import dataclass

from stepbox.colors import Color
from stepbox.models.result import StepStatus

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class StatusStyle:
    """Icon, color and title decoration of one status."""

    icon: str
    color: Color
    shows_exit_code: bool = False


SUCCESS_STYLE = StatusStyle(icon="✅", color=Color.GREEN)
FAILED_STYLE = StatusStyle(icon="🚫", color=Color.RED, shows_exit_code=True)
FAILED_SKIPPABLE_STYLE = StatusStyle(
    icon="⚠️", color=Color.YELLOW, shows_exit_code=True
)
SKIPPED_STYLE = StatusStyle(icon="➡", color=Color.BLUE)
SKIPPED_WITH_CONDITION_STYLE = StatusStyle(icon="↪", color=Color.BLUE)


def style_for(status: StepStatus) -> StatusStyle | None:
    """Return the style of ``status``, or None (logged) for unknown values."""
    match status:
        case StepStatus.SUCCESS:
            return SUCCESS_STYLE
        case StepStatus.FAILED:
            return FAILED_STYLE
        case StepStatus.FAILED_SKIPPABLE:
            return FAILED_SKIPPABLE_STYLE
        case StepStatus.SKIPPED:
            return SKIPPED_STYLE
        case StepStatus.SKIPPED_WITH_CONDITION:
            return SKIPPED_WITH_CONDITION_STYLE
        case _:
            log.error("Unknown step status: %s", status)
            return None
