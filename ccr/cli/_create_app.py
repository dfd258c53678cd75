"""Create the main Typer CLI app."""

import typer

from ccr.cli.code import register_code_commands
from ccr.cli.constants import HELP_TEXT
from ccr.cli.service import register_service_commands


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Claude Code Router CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        add_completion=False,
    )

    register_service_commands(app)
    register_code_commands(app)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(HELP_TEXT)
            raise typer.Exit(1)

    return app
