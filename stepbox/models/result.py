"""Models for step execution results."""

from collections.abc import Sequence
from datetime import datetime, timedelta
from enum import StrEnum

from pydantic import Field

from stepbox.models.base import Model
from stepbox.models.step import StepIdentity, StepMetadata, VersionInfo


class StepStatus(StrEnum):
    """Terminal status of a step."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    SKIPPED_WITH_CONDITION = "skipped_with_condition"
    FAILED = "failed"
    FAILED_SKIPPABLE = "failed_skippable"


class StepResult(Model):
    """Result of a single step execution.

    Created once the step completes; the exit code is only meaningful for
    the failed statuses and the error is only set on failure paths.
    """

    identity: StepIdentity
    metadata: StepMetadata
    version_info: VersionInfo
    status: StepStatus
    exit_code: int = 0
    elapsed: timedelta = Field(default=timedelta(), description="Step run time")
    error: str | None = None
    started_at: datetime | None = Field(
        default=None, description="When the step started, shown in its header"
    )


class RunResult(Model):
    """All step results of one run, in the order the steps finished."""

    results: Sequence[StepResult] = Field(default_factory=tuple)

    def appended(self, result: StepResult) -> "RunResult":
        """Return a new run with ``result`` added after the existing ones."""
        return self.model_copy(update={"results": (*self.results, result)})

    def ordered_results(self) -> Sequence[StepResult]:
        """Results in insertion order, which is the order the summary uses."""
        return tuple(self.results)

    @property
    def total_elapsed(self) -> timedelta:
        return sum((result.elapsed for result in self.results), timedelta())

    @property
    def has_failures(self) -> bool:
        return any(result.status == StepStatus.FAILED for result in self.results)
