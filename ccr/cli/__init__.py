"""CLI - main entry point."""

import sys


def _find_command(argv: list[str]) -> str | None:
    """First token that is not the global display option or its value."""
    from ccr.cli.constants import DISPLAY_OPTIONS

    index = 0
    while index < len(argv):
        token = argv[index]
        if token in DISPLAY_OPTIONS:
            index += 2
        elif token.startswith("--display="):
            index += 1
        else:
            return token
    return None


def _exit_code(exc: SystemExit) -> int:
    if exc.code is None:
        return 0
    if isinstance(exc.code, int):
        return exc.code
    print(exc.code, file=sys.stderr)
    return 1


def _configure_logging() -> None:
    from ccr.api.config.CCRConfig import CCRConfig
    from ccr.utils.logger import configure_logging

    try:
        level = CCRConfig.load().log.level
    except ValueError:
        level = "INFO"
    try:
        configure_logging(CCRConfig.get_home_dir(), level)
    except OSError as e:
        print(f"Warning: file logging disabled: {e}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    A recognised image piped on stdin takes priority over every argument.
    Otherwise the first argument selects the command.
    """
    from ccr.api.sniff.read_image_from_stdin import read_image_from_stdin
    from ccr.cli.constants import APP_COMMANDS, HELP_ALIASES, HELP_TEXT, VERSION_ALIASES
    from ccr.utils.get_logger import get_logger

    if argv is None:
        argv = sys.argv[1:]

    _configure_logging()
    logger = get_logger("cli")

    payload = read_image_from_stdin()
    if payload is not None:
        from ccr.cli.code import run_image

        logger.info("piped %s image (%d bytes)", payload.mime_type.value, len(payload.data))
        try:
            run_image(payload)
        except SystemExit as e:
            return _exit_code(e)
        return 0

    command = _find_command(argv)

    if command in VERSION_ALIASES:
        from ccr.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(result.result)
        return 0 if result.success else 1

    if command in HELP_ALIASES:
        print(HELP_TEXT)
        return 0

    if command not in APP_COMMANDS:
        print(HELP_TEXT)
        return 1

    from ccr.cli._create_app import _create_app

    logger.info("dispatching %s", command)
    app = _create_app()
    try:
        app(argv, prog_name="ccr")
        return 0
    except SystemExit as e:
        return _exit_code(e)
    except Exception as e:
        logger.exception("unhandled error in %s", command)
        print(f"Unhandled error: {e}", file=sys.stderr)
        return 1
