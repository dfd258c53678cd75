"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Every command reports problems in these two lists, even when they are empty."""

    errors: list[str] = Field(default_factory=list, description="Problems that made the command fail")
    warnings: list[str] = Field(default_factory=list, description="Problems the command worked around")
