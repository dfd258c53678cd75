"""Image bytes read from stdin together with their detected type."""

import base64
from dataclasses import dataclass

from .MimeType import MimeType


@dataclass(frozen=True)
class SniffedPayload:
    """Transient payload, consumed once by the image command."""

    data: bytes
    mime_type: MimeType

    def to_base64(self) -> str:
        """Binary-safe encoding used on the wire."""
        return base64.b64encode(self.data).decode("ascii")

    def to_request(self) -> dict[str, str]:
        """Body posted to the service's /upload-image endpoint."""
        return {"imageData": self.to_base64(), "mimeType": self.mime_type.value}
