"""Decrement the reference count."""

import logging

from ._reference_count_path import _reference_count_path
from .read_reference_count import read_reference_count

log = logging.getLogger("ccr.registry")


def decrement_reference_count() -> int:
    """Subtract one from the reference count (never below zero) and return it."""
    count = max(read_reference_count() - 1, 0)
    path = _reference_count_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(str(count), encoding="utf-8")
    except OSError as exc:
        log.warning("could not write reference count %s: %s", path, exc)
    return count
