"""Fixed-width layout primitives."""

from stepbox.layout.fitting import ELLIPSIS, fit_first_chars, fit_last_chars
from stepbox.layout.rows import build_cell, build_row, clip_row
from stepbox.layout.width import WidthBudget
from stepbox.layout.wrapping import wrap_lines, wrap_rows

__all__ = [
    "ELLIPSIS",
    "WidthBudget",
    "build_cell",
    "build_row",
    "clip_row",
    "fit_first_chars",
    "fit_last_chars",
    "wrap_lines",
    "wrap_rows",
]
