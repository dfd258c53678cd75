"""Run the code program against the local service."""

import logging
import os
import signal
import subprocess

from ..config.CCRConfig import CCRConfig
from ..registry.decrement_reference_count import decrement_reference_count
from ..registry.increment_reference_count import increment_reference_count

log = logging.getLogger("ccr.code")


def build_code_env(config: CCRConfig) -> dict[str, str]:
    """Environment pointing the code program at the service."""
    env = os.environ.copy()
    env["ANTHROPIC_BASE_URL"] = config.endpoint
    env["ANTHROPIC_AUTH_TOKEN"] = config.api_key or "test"
    env["API_TIMEOUT_MS"] = str(config.code.api_timeout_ms)
    return env


def execute_code_command(args: list[str], config: CCRConfig) -> int:
    """Run ``config.code.command`` with ``args`` in the foreground and return its exit code.

    The reference count is held for the lifetime of the program. While it
    runs, Ctrl-C belongs to the program: this process ignores SIGINT and
    restores its previous handler afterwards.

    Raises:
        OSError: If the program cannot be executed
    """
    argv = [*config.code.command, *args]
    increment_reference_count()
    try:
        log.info("running %s", argv[0])
        proc = subprocess.Popen(argv, env=build_code_env(config))
        # Installed after the spawn so the program keeps the default disposition
        previous_handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            return proc.wait()
        finally:
            signal.signal(signal.SIGINT, previous_handler)
    finally:
        decrement_reference_count()
