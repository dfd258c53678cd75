"""Read a piped image from standard input."""

import sys
from typing import BinaryIO, TextIO

from .classify import classify
from .SniffedPayload import SniffedPayload


def read_image_from_stdin(stream: TextIO | None = None) -> SniffedPayload | None:
    """Drain a non-interactive stdin and return its content if it is an image.

    Returns None for an interactive terminal, an empty stream, or bytes that
    are not a recognised image. Nothing is read from a terminal.
    """
    stream = sys.stdin if stream is None else stream
    if stream is None or stream.isatty():
        return None

    raw: BinaryIO = getattr(stream, "buffer", stream)  # type: ignore[assignment]
    try:
        data = raw.read()
    except (OSError, ValueError):
        # Closed or unreadable stdin carries no image
        return None
    if isinstance(data, str):
        data = data.encode("latin-1", errors="replace")
    if not data:
        return None

    mime_type = classify(data)
    if mime_type is None:
        return None
    return SniffedPayload(data=data, mime_type=mime_type)
