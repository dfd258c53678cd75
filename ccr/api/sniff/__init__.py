"""Stream sniffer - classify piped bytes as an image by magic number."""

from .classify import classify
from .MimeType import MimeType
from .read_image_from_stdin import read_image_from_stdin
from .SniffedPayload import SniffedPayload

__all__ = ["MimeType", "SniffedPayload", "classify", "read_image_from_stdin"]
