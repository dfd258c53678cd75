"""Persist the service pid."""

from ._pid_path import _pid_path


def write_pid(pid: int) -> None:
    """Write ``pid`` as the sole content of the pid record, replacing any prior one.

    Raises:
        OSError: If the record cannot be written
    """
    path = _pid_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(str(pid), encoding="utf-8")
