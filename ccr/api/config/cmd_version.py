"""Version command - returns CCR version information."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigVersionOutput
from .get_package_version import get_package_version


def cmd_version() -> StageResult:
    """Get CCR version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()
        full_version = f"claude-code-router version: {version}"

        yield (1.0, "Complete")
        result_obj.result = full_version
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
