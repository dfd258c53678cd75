"""Configuration of the pass-through upstream for ``/v1/messages``."""

import os

from pydantic import BaseModel, ConfigDict, Field


class UpstreamConfig(BaseModel):
    """Single upstream the service relays Messages API requests to."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field("https://api.anthropic.com", description="Upstream base URL")
    api_key: str = Field("", description="API key; falls back to ANTHROPIC_API_KEY")

    def resolved_api_key(self) -> str:
        return self.api_key or os.environ.get("ANTHROPIC_API_KEY", "")
