"""Header and footer sections printed around each step."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeAlias

from stepbox.colors import Color, colorize
from stepbox.config import RenderConfig
from stepbox.durations import format_elapsed
from stepbox.layout.fitting import fit_first_chars, fit_last_chars
from stepbox.layout.rows import build_cell, build_row, clip_row
from stepbox.layout.width import WidthBudget
from stepbox.layout.wrapping import wrap_rows
from stepbox.models.result import StepResult
from stepbox.models.step import StepIdentity, StepMetadata, VersionInfo
from stepbox.render.status import StatusStyle, style_for
from stepbox.versions import is_update_available

log = logging.getLogger(__name__)

DEPRECATED_MARKER = "[Deprecated]"
REMOVAL_NOTES_KEY = "Removal notes:"
DOWN_ARROW = "▼"

Fitter: TypeAlias = Callable[..., str]
UpdateCheck: TypeAlias = Callable[[VersionInfo], bool]


@dataclass(frozen=True, kw_only=True)
class StepSectionRenderer:
    """Renders the boxed header and footer of a single step.

    Every method returns finished lines; widths are derived from ``config``
    on each call.
    """

    config: RenderConfig = field(default_factory=RenderConfig)
    update_check: UpdateCheck = is_update_available

    def header(
        self,
        identity: StepIdentity,
        metadata: StepMetadata,
        index: int,
        *,
        timestamp: datetime | None = None,
    ) -> list[str]:
        """Lines printed before the step runs."""
        budget = self.config.budget()
        timestamp = timestamp or datetime.now().astimezone()

        return [
            budget.border(),
            self._field_row(budget, f"({index}) ", metadata.title),
            budget.border(),
            self._field_row(budget, "id: ", identity.id),
            self._field_row(budget, "version: ", identity.version),
            self._field_row(
                budget, "collection: ", identity.library, fit=fit_last_chars
            ),
            self._field_row(
                budget, "time: ", timestamp.isoformat(timespec="seconds")
            ),
            budget.border(),
            budget.blank_row(),
        ]

    def footer(self, result: StepResult, *, is_last: bool) -> list[str]:
        """Lines printed once the step finished."""
        budget = self.config.budget()
        separator = budget.column_separator()

        lines = [budget.blank_row(), separator]
        if row := self.result_row(result):
            lines.append(row)
        lines.append(separator)

        if details := self.detail_rows(result):
            lines.extend(details)
            lines.append(separator)

        if not is_last:
            lines.extend(["", " " * (budget.box_width // 2 + 2) + DOWN_ARROW, ""])
        return lines

    def result_row(self, result: StepResult) -> str:
        """The ``| icon | title | time |`` row, or "" for an unknown status."""
        style = style_for(result.status)
        if style is None:
            return ""

        budget = self.config.budget()
        title = self._title_text(result, style, budget)
        if len(title) > budget.title_width:
            log.error("Step title too long, clipping it: %s", title)
            title = title[: budget.title_width]
        padding = " " * (budget.title_width - len(title))

        icon_cell = build_cell(style.icon, budget.icon_width)
        title_cell = f" {self._paint_title(title, style)}{padding}"
        time_cell = build_cell(
            format_elapsed(result.elapsed, self.config.time_suffix),
            budget.time_width,
        )
        return f"|{icon_cell}|{title_cell}|{time_cell}|"

    def detail_rows(self, result: StepResult) -> list[str]:
        """Optional rows under the result row, in their fixed order.

        Only failed or deprecated steps get detail rows.
        """
        budget = self.config.budget()
        metadata = result.metadata
        rows: list[str] = []
        if result.error is None and not metadata.is_deprecated:
            return rows

        if update_row := self._update_row(budget, result.version_info):
            rows.append(update_row)

        if result.error is not None:
            links = (
                ("Issue tracker: ", metadata.support_url),
                ("Source: ", metadata.source_code_url),
            )
            rows.extend(
                self._field_row(budget, label, url, fit=fit_last_chars)
                for label, url in links
                if url
            )

        if metadata.is_deprecated:
            rows.append(
                self._field_row(
                    budget,
                    "Removal date: ",
                    metadata.removal_date,
                    label_color=Color.RED,
                )
            )
            if notes := metadata.removal_notes:
                rows.extend(
                    wrap_rows(
                        f"{REMOVAL_NOTES_KEY} {notes}",
                        budget.interior_width,
                        highlight=(REMOVAL_NOTES_KEY, self._painter(Color.RED)),
                    )
                )

        return rows

    def _title_text(
        self, result: StepResult, style: StatusStyle, budget: WidthBudget
    ) -> str:
        title = result.metadata.title
        if result.metadata.is_deprecated:
            title = f"{DEPRECATED_MARKER} {title}"

        suffix = f" (exit code: {result.exit_code})" if style.shows_exit_code else ""
        overflow = len(title) + len(suffix) - budget.title_width
        if overflow > 0:
            title = fit_first_chars(
                title, len(title) - overflow, min_width=self.config.min_field_width
            )
        return title + suffix

    def _paint_title(self, title: str, style: StatusStyle) -> str:
        if title.startswith(DEPRECATED_MARKER):
            rest = title.removeprefix(DEPRECATED_MARKER)
            return self._paint(DEPRECATED_MARKER, Color.RED) + self._paint(
                rest, style.color
            )
        return self._paint(title, style.color)

    def _update_row(self, budget: WidthBudget, info: VersionInfo) -> str:
        try:
            available = self.update_check(info)
        except Exception:
            log.warning(
                "Failed to check for step update (%s -> %s)",
                info.current,
                info.latest,
                exc_info=True,
            )
            return ""
        if not available:
            return ""

        candidates = (
            f"Update available: {info.current} -> {info.latest}",
            f"Update available: -> {info.latest}",
            "Update available!",
        )
        for content in candidates:
            if len(content) <= budget.interior_width:
                return build_row(content, budget.box_width)
        return clip_row(candidates[-1], budget.box_width)

    def _field_row(
        self,
        budget: WidthBudget,
        label: str,
        value: str,
        *,
        fit: Fitter = fit_first_chars,
        label_color: Color | None = None,
    ) -> str:
        """Build a ``| label value |`` row, fitting ``value`` into what's left."""
        room = budget.interior_width - len(label)
        value = fit(value, room, min_width=self.config.min_field_width)
        if len(label) + len(value) > budget.interior_width:
            return clip_row(label + value, budget.box_width)

        if label_color is not None:
            key = label.rstrip()
            label = self._paint(key, label_color) + label[len(key) :]
        return build_row(label + value, budget.box_width)

    def _paint(self, text: str, color: Color) -> str:
        return colorize(text, color) if self.config.color else text

    def _painter(self, color: Color) -> Callable[[str], str]:
        return lambda text: self._paint(text, color)
