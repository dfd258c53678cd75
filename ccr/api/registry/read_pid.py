"""Read the service pid."""

from ._pid_path import _pid_path

# Largest value a pid_t can hold
_MAX_PID = 2**31 - 1


def read_pid() -> int | None:
    """Return the stored pid, or None if the record is absent or malformed.

    Values outside ``1.._MAX_PID`` are malformed.
    """
    try:
        pid = int(_pid_path().read_text(encoding="utf-8").strip())
    except (OSError, ValueError, UnicodeDecodeError):
        return None
    if not 0 < pid <= _MAX_PID:
        return None
    return pid
