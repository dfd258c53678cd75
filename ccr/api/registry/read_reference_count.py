"""Read the reference-count record."""

from ._reference_count_path import _reference_count_path


def read_reference_count() -> int:
    """Return the stored count; absent or malformed records read as zero."""
    try:
        return max(int(_reference_count_path().read_text(encoding="utf-8").strip()), 0)
    except (OSError, ValueError, UnicodeDecodeError):
        return 0
