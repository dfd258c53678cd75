"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for version command."""
    version: str = Field(..., description="Installed package version")
    full_version: str = Field(..., description="Version string as printed to the user")


register_output_schema("config", "version", ConfigVersionOutput)
