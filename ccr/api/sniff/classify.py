"""Classify a byte buffer by its leading magic number."""

from .MimeType import MimeType

_MAGIC: dict[str, MimeType] = {
    "89504e47": MimeType.PNG,
    "ffd8ffe0": MimeType.JPEG,
    "ffd8ffe1": MimeType.JPEG,
}


def classify(buffer: bytes) -> MimeType | None:
    """Return the image type of ``buffer``, or None when it is not a known image.

    Only the first four bytes are inspected. Shorter buffers are never images.
    """
    return _MAGIC.get(bytes(buffer[:4]).hex())
