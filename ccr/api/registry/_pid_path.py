from pathlib import Path

from ...constants import PID_FILENAME
from ..config.get_home_dir import get_home_dir


def _pid_path() -> Path:
    """Location of the pid record."""
    return get_home_dir(PID_FILENAME)
