"""Output schemas for API commands; importing this package registers them all."""

from . import code, config, service  # noqa: F401
from ._registry import get_output_schema, register_output_schema

__all__ = ["get_output_schema", "register_output_schema"]
