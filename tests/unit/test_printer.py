"""Tests for ReportPrinter."""

import io
from datetime import UTC, datetime

from stepbox.colors import Color, colorize
from stepbox.config import RenderConfig
from stepbox.models.result import RunResult
from stepbox.printer import ReportPrinter
from stepbox.render.step import StepSectionRenderer
from stepbox.testing.factories import StepResultFactory


def make_printer(*, color: bool = False) -> tuple[ReportPrinter, io.StringIO]:
    stream = io.StringIO()
    renderer = StepSectionRenderer(config=RenderConfig(color=color))
    return ReportPrinter(stream=stream, renderer=renderer), stream


def test_print_workflow_banner() -> None:
    """Prints the workflow title between empty lines."""
    printer, stream = make_printer()

    printer.print_workflow_banner("primary")

    assert stream.getvalue() == "\nRunning workflow (primary)\n\n"


def test_print_workflow_banner_colored() -> None:
    """Paints the banner blue when colors are on."""
    printer, stream = make_printer(color=True)

    printer.print_workflow_banner("primary")

    assert colorize("Running workflow (primary)", Color.BLUE) in stream.getvalue()


def test_print_step_sections() -> None:
    """Writes header and footer lines in call order."""
    printer, stream = make_printer()
    result = StepResultFactory.build()
    timestamp = datetime(2026, 1, 2, tzinfo=UTC)

    printer.print_step_header(result.identity, result.metadata, 1, timestamp=timestamp)
    printer.print_step_footer(result, is_last=True)

    expected = printer.renderer.header(
        result.identity, result.metadata, 1, timestamp=timestamp
    ) + printer.renderer.footer(result, is_last=True)
    assert stream.getvalue().splitlines() == expected


def test_print_summary() -> None:
    """Writes the summary table."""
    printer, stream = make_printer()

    printer.print_summary(RunResult(results=[StepResultFactory.build()]))

    assert "| Total runtime: 1 sec" in stream.getvalue()
