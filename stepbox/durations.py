"""Elapsed time formatting."""

from datetime import timedelta

DEFAULT_SUFFIX = " sec"


def format_elapsed(elapsed: timedelta, suffix: str = DEFAULT_SUFFIX) -> str:
    """Format a duration as seconds.

    Durations above ten seconds are shown as whole seconds, shorter ones
    with up to two decimals (``3.2 sec``, ``6 sec``, ``12 sec``).
    """
    seconds = elapsed.total_seconds()
    if seconds > 10:
        return f"{seconds:.0f}{suffix}"
    text = f"{seconds:.2f}".rstrip("0").rstrip(".")
    return f"{text}{suffix}"
