"""Readiness wait configuration for just-in-time service starts."""

from pydantic import BaseModel, ConfigDict, Field


class StartupConfig(BaseModel):
    """How long ``ccr code`` waits for a freshly spawned service."""

    model_config = ConfigDict(extra="forbid")

    timeout_ms: int = Field(10000, gt=0, description="Give up waiting for the service after this many ms")
    initial_delay_ms: int = Field(1000, ge=0, description="Unconditional sleep before the first liveness probe")
