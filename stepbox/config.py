"""Render configuration."""

from typing import Self

from pydantic import Field, model_validator

from stepbox.durations import DEFAULT_SUFFIX
from stepbox.layout.fitting import ELLIPSIS
from stepbox.layout.width import WidthBudget
from stepbox.models.base import Model

# Narrower boxes can't hold the fixed row labels.
MIN_BOX_WIDTH = 45


class RenderConfig(Model):
    """Fixed layout settings shared by every render of a session."""

    box_width: int = Field(
        default=80,
        ge=MIN_BOX_WIDTH,
        description="Total width of every printed row, borders included",
    )
    icon_width: int = Field(default=4, ge=3, description="Width of the icon column")
    time_width: int = Field(default=10, ge=4, description="Width of the time column")
    min_field_width: int = Field(
        default=4,
        ge=len(ELLIPSIS) + 1,
        description="Narrowest budget a field is still truncated into",
    )
    color: bool = Field(default=True, description="Emit ANSI colors")
    summary_title: str = Field(
        default="stepbox summary", description="Banner text of the summary table"
    )
    time_suffix: str = Field(
        default=DEFAULT_SUFFIX, description="Suffix appended to elapsed seconds"
    )

    @model_validator(mode="after")
    def _check_title_column(self) -> Self:
        if self.budget().title_width < self.min_field_width:
            raise ValueError(
                f"box_width {self.box_width} leaves no room for the title column"
            )
        return self

    def budget(self) -> WidthBudget:
        """Derive the column widths for one render."""
        return WidthBudget(
            box_width=self.box_width,
            icon_width=self.icon_width,
            time_width=self.time_width,
        )
