"""Configuration of the program that ``ccr code`` forwards to."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CodeConfig(BaseModel):
    """Command line and environment for the forwarded code program."""

    model_config = ConfigDict(extra="forbid")

    command: list[str] = Field(default_factory=lambda: ["claude"], description="Program and leading arguments")
    api_timeout_ms: int = Field(600000, gt=0, description="Exported to the program as API_TIMEOUT_MS")

    @field_validator("command")
    @classmethod
    def validate_command(cls, value: list[str]) -> list[str]:
        if not value or not value[0]:
            raise ValueError("code.command must name a program")
        return value
