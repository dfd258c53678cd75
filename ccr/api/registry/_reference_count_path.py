from pathlib import Path

from ...constants import REFERENCE_COUNT_FILENAME
from ..config.get_home_dir import get_home_dir


def _reference_count_path() -> Path:
    """Location of the reference-count record."""
    return get_home_dir(REFERENCE_COUNT_FILENAME)
