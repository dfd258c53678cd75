"""Code command and the piped-image shortcut."""

import json

import typer

from ccr.api.code.cmd_code import cmd_code
from ccr.api.code.cmd_image import cmd_image
from ccr.api.sniff.SniffedPayload import SniffedPayload
from ccr.cli._handle_stage_result import _handle_stage_result


def _print_response(output: dict) -> None:
    """Print the service's answer verbatim."""
    print(json.dumps(output.get("response", {}), indent=2, ensure_ascii=False))


def run_image(payload: SniffedPayload) -> None:
    """Send a piped image to the service; exits the process."""
    _handle_stage_result(cmd_image, result_printer=_print_response)(payload)


def register_code_commands(app: typer.Typer) -> None:
    """Attach the code command to ``app``."""

    @app.command(
        name="code",
        add_help_option=False,
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )
    def code_cmd(ctx: typer.Context) -> None:
        """Execute code command (arguments are passed through)."""
        # The code program owns the terminal; its exit code is ours
        _handle_stage_result(cmd_code, result_printer=lambda _output: None)(list(ctx.args))
