"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command.

    All fields must always be present for consistency.
    """
    state: str = Field(..., description="Derived service state: 'running' or 'stopped'")
    running: bool = Field(..., description="Whether the service is running")
    pid: int = Field(..., description="Process ID if running, -1 if not running")
    port: int = Field(..., description="Configured service port")
    endpoint: str = Field(..., description="Base URL of the service")
    reference_count: int = Field(..., description="Active code sessions recorded in the reference count")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""
    pid: int = Field(..., description="Process ID of the spawned service, -1 if spawning failed")
    log_path: str = Field(..., description="File the detached service writes its output to")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""
    pid: int = Field(..., description="Process ID that was signalled, -1 if no pid was recorded")
    stopped: bool = Field(..., description="Whether the termination signal was delivered")
    message: str = Field(..., description="User-facing stop message")


register_output_schema("service", "status", ServiceStatusOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
