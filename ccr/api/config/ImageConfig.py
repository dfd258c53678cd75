"""Configuration of the upstream image-description call."""

import os

from pydantic import BaseModel, ConfigDict, Field


class ImageConfig(BaseModel):
    """OpenAI-compatible chat endpoint used by ``/upload-image``."""

    model_config = ConfigDict(extra="forbid")

    api_base: str = Field("https://api.openai.com/v1", description="Base URL of the chat completions API")
    api_key: str = Field("", description="API key; falls back to OPENAI_API_KEY")
    model: str = Field("gpt-4o", description="Model identifier sent upstream")
    max_tokens: int = Field(300, gt=0, description="Response-length cap")
    prompt: str = Field("Describe the main content of this image.", description="Text part sent with the image")
    timeout_secs: float = Field(60.0, gt=0, description="Upstream request timeout")

    def resolved_api_key(self) -> str:
        return self.api_key or os.environ.get("OPENAI_API_KEY", "")
