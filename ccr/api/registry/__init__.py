"""Process registry - persisted pid record and reference-count record.

Both records are plain scalar text files under the CCR home directory. Every
read goes back to disk; nothing is cached in memory.
"""

from .clear_pid import clear_pid
from .clear_reference_count import clear_reference_count
from .decrement_reference_count import decrement_reference_count
from .increment_reference_count import increment_reference_count
from .read_pid import read_pid
from .read_reference_count import read_reference_count
from .write_pid import write_pid

__all__ = [
    "clear_pid",
    "clear_reference_count",
    "decrement_reference_count",
    "increment_reference_count",
    "read_pid",
    "read_reference_count",
    "write_pid",
]
