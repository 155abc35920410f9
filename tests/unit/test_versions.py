"""Tests for update availability."""

import logging

import pytest

from stepbox.models.step import VersionInfo
from stepbox.versions import is_update_available


@pytest.mark.parametrize(
    ("current", "latest", "expected"),
    [
        ("1.0.0", "1.1.0", True),
        ("1.9.0", "1.10.0", True),
        ("2.0.0", "2.0.0", False),
        ("2.1.0", "2.0.0", False),
        ("1.0.0", None, False),
        ("1.0.0", "", False),
    ],
)
def test_is_update_available(
    current: str, latest: str | None, expected: bool
) -> None:
    """Compares the current version with the latest known one."""
    info = VersionInfo(current=current, latest=latest)

    assert is_update_available(info) is expected


def test_invalid_version_means_no_update(caplog: pytest.LogCaptureFixture) -> None:
    """Logs comparison failures and reports no update."""
    info = VersionInfo(current="not a version", latest="1.0.0")

    with caplog.at_level(logging.DEBUG):
        assert is_update_available(info) is False

    assert "Failed to compare versions" in caplog.text
