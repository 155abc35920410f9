"""Column width arithmetic for the report box."""

from dataclasses import dataclass

# "| " and " |"
BORDER_WIDTH = 4


@dataclass(frozen=True, kw_only=True)
class WidthBudget:
    """Widths derived from the total box width and the fixed columns.

    The footer row is laid out as ``|<icon>|<title column>|<time>|``; the
    title column holds one leading space plus ``title_width`` characters.
    """

    box_width: int
    icon_width: int = 4
    time_width: int = 10

    @property
    def interior_width(self) -> int:
        """Content width of a plain ``| content |`` row."""
        return self.box_width - BORDER_WIDTH

    @property
    def title_width(self) -> int:
        return self.box_width - BORDER_WIDTH - self.icon_width - self.time_width - 1

    @property
    def title_column_width(self) -> int:
        return self.title_width + 1

    def border(self) -> str:
        return f"+{'-' * (self.box_width - 2)}+"

    def column_separator(self) -> str:
        return (
            f"+{'-' * self.icon_width}"
            f"+{'-' * self.title_column_width}"
            f"+{'-' * self.time_width}+"
        )

    def blank_row(self) -> str:
        return f"|{' ' * (self.box_width - 2)}|"
