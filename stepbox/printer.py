"""Writing rendered report lines to a text stream."""

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from stepbox.colors import Color, colorize
from stepbox.models.result import RunResult, StepResult
from stepbox.models.step import StepIdentity, StepMetadata
from stepbox.render.step import StepSectionRenderer
from stepbox.render.summary import SummaryRenderer


@dataclass(frozen=True, kw_only=True)
class ReportPrinter:
    """Prints step sections and the run summary as they become available."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)
    renderer: StepSectionRenderer = field(default_factory=StepSectionRenderer)

    def print_workflow_banner(self, title: str) -> None:
        banner = f"Running workflow ({title})"
        if self.renderer.config.color:
            banner = colorize(banner, Color.BLUE)
        self._write(["", banner, ""])

    def print_step_header(
        self,
        identity: StepIdentity,
        metadata: StepMetadata,
        index: int,
        *,
        timestamp: datetime | None = None,
    ) -> None:
        self._write(
            self.renderer.header(identity, metadata, index, timestamp=timestamp)
        )

    def print_step_footer(self, result: StepResult, *, is_last: bool) -> None:
        self._write(self.renderer.footer(result, is_last=is_last))

    def print_summary(self, run: RunResult) -> None:
        self._write(SummaryRenderer(steps=self.renderer).render(run))

    def _write(self, lines: Iterable[str]) -> None:
        for line in lines:
            print(line, file=self.stream)
