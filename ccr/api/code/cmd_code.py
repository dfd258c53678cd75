"""Code command - ensure the service is up, then forward arguments."""

from collections.abc import Iterator

from ..config.CCRConfig import CCRConfig
from ..service.is_service_running import is_service_running
from ..service.Supervisor import Supervisor
from ..StageResult import StageResult
from . import CodeCodeOutput
from .execute_code_command import execute_code_command

STARTUP_TIMEOUT_MESSAGE = "Service startup timeout, please manually run `ccr start` to start the service"


def cmd_code(args: list[str] | None = None) -> StageResult:
    """Forward ``args`` to the code program, starting the service first if needed."""
    forwarded = list(args or [])

    def fail(result_obj: StageResult, message: str, started: bool) -> None:
        result_obj.result = message
        result_obj.output = CodeCodeOutput(
            errors=[message],
            warnings=[],
            args=forwarded,
            started_service=started,
            exit_code=-1,
        ).model_dump(mode="python")
        result_obj.success = False
        result_obj.exit_code = 1

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = CCRConfig.load()
        except ValueError as exc:
            yield (1.0, "Complete")
            fail(result_obj, f"Error loading configuration: {exc}", False)
            return

        started = False
        if not is_service_running():
            yield (0.2, "Service not running, starting service...")
            supervisor = Supervisor(config)
            try:
                supervisor.spawn_launcher()
            except OSError as exc:
                yield (1.0, "Complete")
                fail(result_obj, f"Failed to start service: {exc}", False)
                return
            started = True

            yield (0.4, "Waiting for service to become ready...")
            if not supervisor.wait_until_ready(config.startup.timeout_ms, config.startup.initial_delay_ms):
                yield (1.0, "Complete")
                fail(result_obj, STARTUP_TIMEOUT_MESSAGE, started)
                return

        program = config.code.command[0]
        yield (0.7, f"Running {program}...")
        try:
            exit_code = execute_code_command(forwarded, config)
        except OSError as exc:
            yield (1.0, "Complete")
            fail(result_obj, f"Failed to run {program}: {exc}", started)
            return

        yield (1.0, "Complete")
        result_obj.result = f"{program} exited with code {exit_code}"
        result_obj.output = CodeCodeOutput(
            errors=[],
            warnings=[],
            args=forwarded,
            started_service=started,
            exit_code=exit_code,
        ).model_dump(mode="python")
        result_obj.success = exit_code == 0
        result_obj.exit_code = exit_code

    return StageResult(
        announce="Preparing code session...",
        progress_callback=do_work,
    )
