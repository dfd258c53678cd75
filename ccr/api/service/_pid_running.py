"""Process liveness probe."""

import os


def _pid_running(pid: int) -> bool:
    """True when ``pid`` names a live process we are allowed to signal."""
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except (OSError, OverflowError):
        # Gone, not ours to signal, or not a pid at all
        return False
    return True
