"""Service lifecycle commands."""

import typer

from ccr.api.service.cmd_start import cmd_start
from ccr.api.service.cmd_status import cmd_status
from ccr.api.service.cmd_stop import cmd_stop
from ccr.cli._handle_stage_result import _handle_stage_result


def register_service_commands(app: typer.Typer) -> None:
    """Attach start, stop and status to ``app``."""

    @app.command(name="start")
    def start_cmd() -> None:
        """Start service."""
        _handle_stage_result(cmd_start)()

    @app.command(name="stop")
    def stop_cmd() -> None:
        """Stop service."""
        _handle_stage_result(cmd_stop)()

    @app.command(name="status")
    def status_cmd() -> None:
        """Show service status."""
        _handle_stage_result(cmd_status)()
