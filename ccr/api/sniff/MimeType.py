"""Image mime types recognised on stdin."""

from enum import Enum


class MimeType(str, Enum):
    PNG = "image/png"
    JPEG = "image/jpeg"
