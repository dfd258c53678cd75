"""Delete the reference-count record."""

from contextlib import suppress

from ._reference_count_path import _reference_count_path


def clear_reference_count() -> None:
    """Remove the reference-count record, ignoring any error."""
    with suppress(Exception):
        _reference_count_path().unlink(missing_ok=True)
