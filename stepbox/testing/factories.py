"""Test factories for generating step results."""

from datetime import timedelta

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from stepbox.models.result import StepResult, StepStatus
from stepbox.models.step import StepIdentity, StepMetadata, VersionInfo


class StepIdentityFactory(ModelFactory[StepIdentity]):
    """Factory for StepIdentity."""

    version = "1.0.0"


class StepMetadataFactory(ModelFactory[StepMetadata]):
    """Factory for StepMetadata."""

    title = "Build"
    support_url = ""
    source_code_url = ""
    deprecation = None


class VersionInfoFactory(ModelFactory[VersionInfo]):
    """Factory for VersionInfo."""

    current = "1.0.0"
    latest = None


class StepResultFactory(ModelFactory[StepResult]):
    """Factory for StepResult."""

    identity = Use(StepIdentityFactory.build)
    metadata = Use(StepMetadataFactory.build)
    version_info = Use(VersionInfoFactory.build)
    status = StepStatus.SUCCESS
    exit_code = 0
    elapsed = timedelta(seconds=1)
    error = None
    started_at = None
