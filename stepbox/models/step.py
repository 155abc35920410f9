"""Models describing a step: who it is, what it shows, which version it runs."""

from pydantic import Field

from stepbox.models.base import Model


class StepIdentity(Model):
    """Identity of a step as resolved from its library."""

    id: str = Field(..., description="Step identifier (e.g., 'git-clone')")
    version: str = Field(..., description="Resolved step version")
    library: str = Field(
        default="", description="Step library/collection reference (URL or path)"
    )


class DeprecationInfo(Model):
    """Removal schedule of a deprecated step.

    Both fields are optional on their own: notes may be empty while the
    removal date is set.
    """

    removal_date: str = Field(default="", description="Planned removal date")
    removal_notes: str = Field(default="", description="Free form removal notes")


class StepMetadata(Model):
    """Human-facing metadata of a step."""

    title: str = Field(..., description="Step title")
    support_url: str = Field(default="", description="Issue tracker URL")
    source_code_url: str = Field(default="", description="Source code URL")
    deprecation: DeprecationInfo | None = Field(
        default=None, description="Removal schedule, if the step is deprecated"
    )

    @property
    def removal_date(self) -> str:
        return self.deprecation.removal_date if self.deprecation else ""

    @property
    def removal_notes(self) -> str:
        return self.deprecation.removal_notes if self.deprecation else ""

    @property
    def is_deprecated(self) -> bool:
        """A step counts as deprecated only once a removal date is announced."""
        return bool(self.removal_date)


class VersionInfo(Model):
    """Version the step ran with and the latest version known for it."""

    current: str = Field(..., description="Version used in this run")
    latest: str | None = Field(
        default=None, description="Latest known version (None means unknown)"
    )
