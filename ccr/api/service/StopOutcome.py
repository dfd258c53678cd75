"""Result of Supervisor.stop()."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StopOutcome:
    """Outcome of the termination signal; cleanup always runs regardless."""

    pid: int | None
    """Pid read from the registry, or None when no record existed."""

    signalled: bool
    """Whether SIGTERM was delivered."""
