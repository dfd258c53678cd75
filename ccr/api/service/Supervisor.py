"""Service supervisor: spawn, readiness wait, and stop."""

import logging
import os
import signal
import subprocess
import sys
import time
from pathlib import Path

from ...constants import POLL_INTERVAL_MS, SERVICE_LOG, SETTLE_DELAY_MS
from ..config.CCRConfig import CCRConfig
from ..registry.clear_pid import clear_pid
from ..registry.clear_reference_count import clear_reference_count
from ..registry.read_pid import read_pid
from .is_service_running import is_service_running
from .StopOutcome import StopOutcome
from .SupervisorState import SupervisorState

log = logging.getLogger("ccr.service.supervisor")


class Supervisor:
    """Lifecycle operations for the background service.

    The spawned service is never waited on: it runs in its own session with
    no inherited standard streams so the launching process may exit at once.
    """

    def __init__(self, config: CCRConfig | None = None) -> None:
        self.config = config if config is not None else CCRConfig.load()
        self.state = SupervisorState.IDLE

    def service_argv(self) -> list[str]:
        """Command line of the service process."""
        return [
            sys.executable,
            "-m",
            "ccr.api.service._child_runner",
            "--host",
            self.config.host,
            "--port",
            str(self.config.port),
        ]

    def launcher_argv(self) -> list[str]:
        """Command line of a detached ``ccr start`` invocation."""
        return [sys.executable, "-m", "ccr", "start"]

    def log_path(self) -> Path:
        """File the service logs to."""
        return CCRConfig.get_home_dir() / SERVICE_LOG

    def _spawn_detached(self, argv: list[str]) -> int:
        env = os.environ.copy()
        env["PYTHONPATH"] = env.get("PYTHONPATH", str(Path(__file__).resolve().parents[3]))

        self.state = SupervisorState.STARTING
        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,  # Detach from parent process group
                env=env,
            )
        except OSError:
            self.state = SupervisorState.FAILED
            raise
        log.info("spawned %s (pid %s)", " ".join(argv[1:]), proc.pid)
        return proc.pid

    def start(self) -> int:
        """Spawn the service detached and return its pid without waiting for readiness.

        Raises:
            OSError: If the process cannot be spawned
        """
        self.log_path().parent.mkdir(parents=True, exist_ok=True)
        return self._spawn_detached(self.service_argv())

    def spawn_launcher(self) -> int:
        """Spawn a detached ``ccr start`` and return its pid.

        Raises:
            OSError: If the process cannot be spawned
        """
        return self._spawn_detached(self.launcher_argv())

    def wait_until_ready(self, timeout_ms: int | None = None, initial_delay_ms: int | None = None) -> bool:
        """Poll liveness until the service is up or ``timeout_ms`` elapses.

        Sleeps ``initial_delay_ms`` first, then probes every 100 ms. A live
        service is given a further 500 ms to settle before True is returned.
        Returns False on timeout.
        """
        if timeout_ms is None:
            timeout_ms = self.config.startup.timeout_ms
        if initial_delay_ms is None:
            initial_delay_ms = self.config.startup.initial_delay_ms

        time.sleep(initial_delay_ms / 1000)

        started = time.monotonic()
        while (time.monotonic() - started) * 1000 < timeout_ms:
            if is_service_running():
                time.sleep(SETTLE_DELAY_MS / 1000)
                self.state = SupervisorState.READY
                return True
            time.sleep(POLL_INTERVAL_MS / 1000)

        log.warning("service not ready after %s ms", timeout_ms)
        self.state = SupervisorState.FAILED
        return False

    def stop(self) -> StopOutcome:
        """Send SIGTERM to the registered pid, then clear both registry records.

        Cleanup runs whether or not the signal was delivered.
        """
        pid = read_pid()
        signalled = False
        if pid is not None and pid > 0:
            try:
                os.kill(pid, signal.SIGTERM)
                signalled = True
            except (OSError, OverflowError) as exc:
                log.info("could not signal pid %s: %s", pid, exc)

        clear_pid()
        clear_reference_count()
        self.state = SupervisorState.STOPPED
        return StopOutcome(pid=pid, signalled=signalled)
