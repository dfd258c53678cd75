"""Service start command - spawns the detached service and returns."""

from collections.abc import Iterator

from ..config.CCRConfig import CCRConfig
from ..registry.read_pid import read_pid
from ..StageResult import StageResult
from . import ServiceStartOutput
from .is_service_running import is_service_running
from .Supervisor import Supervisor


def cmd_start() -> StageResult:
    """Start the service in the background without waiting for readiness."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = CCRConfig.load()
        except ValueError as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error starting service: {exc}"
            result_obj.output = ServiceStartOutput(
                errors=[str(exc)],
                warnings=[],
                pid=-1,
                log_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        supervisor = Supervisor(config)
        log_path = str(supervisor.log_path())

        yield (0.3, "Checking for a running service...")
        if is_service_running():
            pid = read_pid() or -1
            yield (1.0, "Complete")
            result_obj.result = f"Service already running (pid {pid})"
            result_obj.output = ServiceStartOutput(
                errors=[],
                warnings=["service already running"],
                pid=pid,
                log_path=log_path,
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.6, "Spawning service...")
        try:
            pid = supervisor.start()
        except OSError as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to start service: {exc}"
            result_obj.output = ServiceStartOutput(
                errors=[str(exc)],
                warnings=[],
                pid=-1,
                log_path=log_path,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service started (pid {pid}) on {config.endpoint}"
        result_obj.output = ServiceStartOutput(
            errors=[],
            warnings=[],
            pid=pid,
            log_path=log_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Starting service...",
        progress_callback=do_work,
    )
