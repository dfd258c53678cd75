"""Output schemas for code commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class CodeCodeOutput(BaseOutputSchema):
    """Output schema for the code command."""
    args: list[str] = Field(..., description="Arguments forwarded to the code program")
    started_service: bool = Field(..., description="Whether the service had to be started first")
    exit_code: int = Field(..., description="Exit code of the code program, -1 if it never ran")


class CodeImageOutput(BaseOutputSchema):
    """Output schema for the piped-image command."""
    mime_type: str = Field(..., description="Detected image mime type")
    size: int = Field(..., description="Image size in bytes")
    status_code: int = Field(..., description="HTTP status returned by the service, -1 if unreachable")
    response: dict[str, Any] = Field(..., description="Response body from the service, passed through verbatim")


register_output_schema("code", "code", CodeCodeOutput)
register_output_schema("code", "image", CodeImageOutput)
