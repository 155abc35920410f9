"""CLI entry point rendering the report of a recorded run."""

import argparse
import json
import logging
import sys
from pathlib import Path

from stepbox.config import RenderConfig
from stepbox.models.result import RunResult
from stepbox.printer import ReportPrinter
from stepbox.render.step import StepSectionRenderer


def load_run_result(path: Path) -> RunResult:
    """Load a run result recorded as JSON."""
    return RunResult.model_validate_json(path.read_text(encoding="utf-8"))


def load_render_config(render_config_json: str, *, no_color: bool) -> RenderConfig:
    """Build the render config from JSON, applying the --no-color override."""
    config_dict = json.loads(render_config_json)
    if no_color:
        config_dict["color"] = False
    return RenderConfig(**config_dict)


def run(
    results_path: Path,
    render_config_json: str = "{}",
    workflow_title: str | None = None,
    summary_only: bool = False,
    no_color: bool = False,
) -> int:
    """Print the report of a recorded run and return exit code."""
    log = logging.getLogger("stepbox")

    log.info("Loading run result: %s", results_path)
    run_result = load_run_result(results_path)
    config = load_render_config(render_config_json, no_color=no_color)

    printer = ReportPrinter(renderer=StepSectionRenderer(config=config))
    results = run_result.ordered_results()
    log.info("Rendering report for %d step(s)", len(results))

    if not summary_only:
        if workflow_title:
            printer.print_workflow_banner(workflow_title)
        for idx, result in enumerate(results):
            printer.print_step_header(
                result.identity,
                result.metadata,
                idx + 1,
                timestamp=result.started_at,
            )
            printer.print_step_footer(result, is_last=idx == len(results) - 1)

    printer.print_summary(run_result)

    return 1 if run_result.has_failures else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render the boxed step report of a recorded run"
    )
    parser.add_argument(
        "--results",
        type=Path,
        required=True,
        help="Path to the run result JSON file",
    )
    parser.add_argument(
        "--render-config",
        default="{}",
        help="JSON render configuration (e.g., '{\"box_width\": 100}')",
    )
    parser.add_argument(
        "--workflow-title",
        default=None,
        help="Workflow title printed before the first step",
    )
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Only print the summary table",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        results_path=args.results,
        render_config_json=args.render_config,
        workflow_title=args.workflow_title,
        summary_only=args.summary_only,
        no_color=args.no_color,
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
