"""Check a command's output dict against the schema registered for it."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def _command_key(func: Callable) -> tuple[str, str] | None:
    """``ccr.api.<domain>.cmd_<name>`` -> ``(domain, name)``; None for anything else."""
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[:2] != ["ccr", "api"] or not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` normalised by the schema of ``func``.

    Functions outside ``ccr.api`` and commands without a schema pass through
    unchanged.

    Raises:
        ValueError: If ``output`` does not match the schema
    """
    key = _command_key(func)
    schema_class = get_output_schema(*key) if key is not None else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        domain, command = key
        raise ValueError(f"Output validation failed for {domain}.{command}: {e}") from e
