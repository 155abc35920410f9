"""Summary table of a whole run."""

from dataclasses import dataclass, field

from stepbox.durations import format_elapsed
from stepbox.layout.fitting import fit_first_chars
from stepbox.layout.rows import build_row
from stepbox.models.result import RunResult
from stepbox.render.step import StepSectionRenderer


@dataclass(frozen=True, kw_only=True)
class SummaryRenderer:
    """Renders the result rows of every step followed by the total runtime."""

    steps: StepSectionRenderer = field(default_factory=StepSectionRenderer)

    def render(self, run: RunResult) -> list[str]:
        config = self.steps.config
        budget = config.budget()
        separator = budget.column_separator()

        inner = budget.box_width - 2
        title = fit_first_chars(
            config.summary_title, inner, min_width=config.min_field_width
        )[:inner]
        time_header = " time (s)"[: budget.time_width].ljust(budget.time_width)
        column_header = (
            f"|{' ' * budget.icon_width}"
            f"|{' title'.ljust(budget.title_column_width)}"
            f"|{time_header}|"
        )

        lines = [
            "",
            "",
            budget.border(),
            f"|{title.center(inner)}|",
            separator,
            column_header,
            separator,
        ]

        for result in run.ordered_results():
            if row := self.steps.result_row(result):
                lines.append(row)
                lines.append(separator)
            if details := self.steps.detail_rows(result):
                lines.extend(details)
                lines.append(separator)

        runtime = format_elapsed(run.total_elapsed, config.time_suffix)
        lines.append(build_row(f"Total runtime: {runtime}", budget.box_width))
        lines.append(budget.border())
        lines.append("")
        return lines
