"""Delete the pid record."""

from contextlib import suppress

from ._pid_path import _pid_path


def clear_pid() -> None:
    """Remove the pid record; a no-op when it is already gone."""
    with suppress(OSError):
        _pid_path().unlink(missing_ok=True)
