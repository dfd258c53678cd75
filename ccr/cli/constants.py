"""CLI text and command names."""

HELP_TEXT = """
Usage: ccr [command]

Commands:
  start         Start service
  stop          Stop service
  status        Show service status
  code          Execute code command
  -v, version   Show version information
  -h, help      Show help information

Options:
  -d, --display [yaml|json]   Structured output format (default: yaml)

Pipe a PNG or JPEG image on stdin to have the running service describe it.

Example:
  ccr start
  ccr code "Write a Hello World"
  cat screenshot.png | ccr
"""

VERSION_ALIASES = ("-v", "version")

HELP_ALIASES = ("-h", "help")

APP_COMMANDS = ("start", "stop", "status", "code")

DISPLAY_OPTIONS = ("-d", "--display")
