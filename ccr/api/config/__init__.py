"""Config API module."""

from .._output_schemas.config import ConfigVersionOutput

__all__ = ["ConfigVersionOutput"]
