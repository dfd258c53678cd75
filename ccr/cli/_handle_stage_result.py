"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context, defaulting to yaml."""
    import click

    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> F:
    """Turn a ``cmd_*`` function into a CLI action.

    Messages go to stderr and structured output to stdout, unless
    ``result_printer`` takes over the output. Calling the wrapper never
    returns: it exits with the command's exit status.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from ccr.cli.display import get_display

        _run_single_execution(
            func, args, kwargs, get_display(), _extract_display_format(), result_printer, suppress_output
        )

    return wrapper  # type: ignore[return-value]
