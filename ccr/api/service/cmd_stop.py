"""Service stop command - signals the service and clears the registry."""

from collections.abc import Iterator

from ..config.CCRConfig import CCRConfig
from ..StageResult import StageResult
from . import ServiceStopOutput
from .Supervisor import Supervisor

STOPPED_MESSAGE = "claude code router service has been successfully stopped."
ALREADY_STOPPED_MESSAGE = "Failed to stop the service. It may have already been stopped."


def cmd_stop() -> StageResult:
    """Stop the service. Never fails: a missing or dead service reads as already stopped."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Signalling service...")
        warnings: list[str] = []
        try:
            config = CCRConfig.load()
        except ValueError as exc:
            # Stopping needs nothing from the config file
            warnings.append(str(exc))
            config = CCRConfig()

        outcome = Supervisor(config).stop()
        yield (1.0, "Complete")

        message = STOPPED_MESSAGE if outcome.signalled else ALREADY_STOPPED_MESSAGE
        result_obj.result = message
        result_obj.output = ServiceStopOutput(
            errors=[],
            warnings=warnings,
            pid=outcome.pid if outcome.pid is not None else -1,
            stopped=outcome.signalled,
            message=message,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Stopping service...",
        progress_callback=do_work,
    )
