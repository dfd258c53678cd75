"""Liveness check for the background service."""

from ..registry.read_pid import read_pid
from ._pid_running import _pid_running


def is_service_running() -> bool:
    """Return True if the registered pid belongs to a live process.

    A stale record is left in place; callers that act on a False result are
    responsible for clearing it.
    """
    pid = read_pid()
    if pid is None:
        return False
    return _pid_running(pid)
