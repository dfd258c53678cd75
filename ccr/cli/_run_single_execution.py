"""Run one command and render its four stages on the terminal."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from rich.markup import escape

from ccr.api.StageResult import StageResult
from ccr.api.validate_output import validate_output


def _exit_status(result: StageResult) -> int:
    if result.exit_code is not None:
        return result.exit_code
    return 0 if result.success else 1


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> None:
    """Run ``func`` once, show announce, progress, result and output, then exit.

    Commands report failures through their output schema. A command that
    finishes without a result or output, or whose output breaks its schema,
    is a bug and raises ValueError.
    """
    result = func(*args, **kwargs)
    show = not suppress_output

    if show:
        display.status(result.announce)
    for fraction, message in result.progress_callback(result):
        if show:
            display.info(f"[dim]{datetime.now():%H:%M:%S}[/dim] {escape(message)} ({fraction:.0%})")

    if not result.result or not result.output:
        raise ValueError(f"{func.__name__} finished without setting result and output")
    result.output = validate_output(func, result.output)

    if show:
        if result.success:
            display.success(escape(result.result))
        else:
            display.error(escape(result.result))

    if result_printer is not None:
        result_printer(result.output)
    elif show:
        display.json_output(result.output, format=display_format)

    sys.exit(_exit_status(result))
