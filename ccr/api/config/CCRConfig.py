"""Top-level CCR configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_HOST, DEFAULT_PORT
from .CodeConfig import CodeConfig
from .get_home_dir import get_home_dir
from .ImageConfig import ImageConfig
from .LogConfig import LogConfig
from .StartupConfig import StartupConfig
from .UpstreamConfig import UpstreamConfig


class CCRConfig(BaseModel):
    """Top-level configuration for the router CLI and its service."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field(DEFAULT_HOST, description="Interface the service listens on")
    port: int = Field(DEFAULT_PORT, gt=0, lt=65536, description="Port the service listens on")
    api_key: str = Field("", description="Auth token handed to the code program")
    log: LogConfig = Field(default_factory=LogConfig)
    startup: StartupConfig = Field(default_factory=StartupConfig)
    code: CodeConfig = Field(default_factory=CodeConfig)
    image: ImageConfig = Field(default_factory=ImageConfig)
    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)

    @property
    def endpoint(self) -> str:
        """Base URL clients use to reach the service."""
        return f"http://{self.host}:{self.port}"

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get CCR home directory based on CCR_HOME or default to ~/.claude-code-router."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the config file inside the CCR home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "CCRConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert CCRConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="python")

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
