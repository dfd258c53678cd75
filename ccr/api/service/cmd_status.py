"""Service status command (derived fresh from the registry)."""

from collections.abc import Iterator

from ..config.CCRConfig import CCRConfig
from ..registry.read_pid import read_pid
from ..registry.read_reference_count import read_reference_count
from ..StageResult import StageResult
from . import ServiceStatusOutput
from .get_service_state import get_service_state
from .ServiceState import ServiceState


def cmd_status() -> StageResult:
    """Return whether the service is running, and where."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        warnings: list[str] = []
        try:
            config = CCRConfig.load()
        except ValueError as exc:
            warnings.append(str(exc))
            config = CCRConfig()

        yield (0.6, "Checking service status...")
        state = get_service_state()
        running = state is ServiceState.RUNNING
        pid = (read_pid() or -1) if running else -1

        yield (1.0, "Complete")
        if running:
            result_obj.result = f"Service is running (pid {pid}) on {config.endpoint}"
        else:
            result_obj.result = "Service is not running"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=warnings,
            state=state.value,
            running=running,
            pid=pid,
            port=config.port,
            endpoint=config.endpoint,
            reference_count=read_reference_count(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
