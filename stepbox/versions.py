"""Update availability check for step versions."""

import logging

from packaging.version import InvalidVersion, Version

from stepbox.models.step import VersionInfo

log = logging.getLogger(__name__)


def is_update_available(info: VersionInfo) -> bool:
    """Return True when the latest known version is newer than the current one.

    An unknown latest version or versions that can't be compared count as
    "no update available".
    """
    if not info.latest:
        return False

    try:
        return Version(info.latest) > Version(info.current)
    except InvalidVersion as err:
        log.debug("Failed to compare versions, err: %s", err)
        return False
